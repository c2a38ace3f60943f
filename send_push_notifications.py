"""Sends a push notification to every user with a registered Expo push token."""
import argparse
import logging
import sys
from dotenv import load_dotenv

from backend import config
from backend.push import DEFAULT_BODY, DEFAULT_TITLE, notify_all_users

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None, db=None):
    load_dotenv()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Title; '{name}' is replaced by the user's display name.")
    parser.add_argument("--body", default=DEFAULT_BODY)
    args = parser.parse_args(argv)

    try:
        if db is None:
            db = config.init_firestore()
        summary = notify_all_users(db, args.title, args.body)
    except Exception as e:
        logger.error(f"Error sending notifications: {e}")
        return 1

    return 0 if summary.failed == 0 else 1


if __name__ == '__main__':
    sys.exit(main())
