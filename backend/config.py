import os
import logging
import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_PAGE_SIZE = 100
EXPO_PUSH_URL = 'https://exp.host/--/api/v2/push/send'


def credentials_path():
    """Path to the Firebase service account key (FIREBASE_CREDENTIALS or ./serviceAccountKey.json)."""
    path = os.getenv('FIREBASE_CREDENTIALS', 'serviceAccountKey.json')
    if not os.path.isabs(path):
        path = os.path.join(PROJECT_ROOT, path)
    return path


def reset_page_size():
    return int(os.getenv('RESET_PAGE_SIZE', DEFAULT_PAGE_SIZE))


def retry_attempts():
    return int(os.getenv('STORE_RETRY_ATTEMPTS', 3))


def retry_delay():
    return float(os.getenv('STORE_RETRY_DELAY', 0.5))


def expo_push_url():
    return os.getenv('EXPO_PUSH_URL', EXPO_PUSH_URL)


def init_firestore():
    """Initializes the default Firebase app once and returns a Firestore client."""
    if not firebase_admin._apps:
        cred = credentials.Certificate(credentials_path())
        firebase_admin.initialize_app(cred)
        logger.info("Firebase connection successful.")
    return firestore.client()
