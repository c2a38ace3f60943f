import logging
from dataclasses import dataclass
import requests

from backend import config

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Hi {name}! 💖"
DEFAULT_BODY = "Here is a heartful message just for you. Have a wonderful day!"


@dataclass
class NotificationSummary:
    sent: int = 0
    skipped: int = 0
    failed: int = 0

    def to_dict(self):
        return {"sent": self.sent, "skipped": self.skipped, "failed": self.failed}


def send_push_notification(token, title, body, data=None, session=None, url=None):
    """Sends one message through the Expo push gateway and returns its JSON response."""
    message = {
        "to": token,
        "sound": "default",
        "title": title,
        "body": body,
        "data": data or {},
    }
    http = session or requests
    response = http.post(
        url or config.expo_push_url(),
        json=message,
        headers={
            "Accept": "application/json",
            "Accept-encoding": "gzip, deflate",
            "Content-Type": "application/json",
        },
        timeout=10,
    )
    response.raise_for_status()
    return response.json()


def notify_all_users(db, title_template=DEFAULT_TITLE, body=DEFAULT_BODY, send=send_push_notification):
    """Sends a notification to every user with a push token and display name."""
    summary = NotificationSummary()

    for user_doc in db.collection('users').stream():
        user = user_doc.to_dict() or {}
        token = user.get('pushToken')
        name = user.get('displayName')
        if not token or not name:
            summary.skipped += 1
            continue

        try:
            result = send(token, title_template.replace("{name}", name), body)
            logger.info(f"Notification sent to {name}: {result}")
            summary.sent += 1
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to send notification to {name}: {e}")
            summary.failed += 1

    logger.info(f"All notifications sent ({summary.sent} sent, {summary.skipped} skipped, {summary.failed} failed).")
    return summary
