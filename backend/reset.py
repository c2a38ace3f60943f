import logging
from dataclasses import dataclass, field
from firebase_admin import firestore

from backend import config
from backend.purger import BatchCollectionPurger
from backend.retry import RetryPolicy, RetryingStore
from backend.store import FirestoreStore

logger = logging.getLogger(__name__)


def placeholder_documents(timestamp=firestore.SERVER_TIMESTAMP):
    """
    Seed document per known collection: {collection: (doc_id, payload)}.

    Firestore only lists a collection while it holds a document, so one of these
    is written back after a reset to keep every collection discoverable.
    """
    return {
        'users': ('placeholder_user', {
            'displayName': 'Placeholder User',
            'email': 'placeholder@example.com',
            'role': 'student',
        }),
        'activities': ('placeholder_activity', {
            'userId': 'placeholder_user',
            'type': 'journal',
            'timestamp': timestamp,
        }),
        'moodEntries': ('placeholder_mood', {
            'userId': 'placeholder_user',
            'rating': 5,
            'date': timestamp,
        }),
        'journals': ('placeholder_journal', {
            'userId': 'placeholder_user',
            'text': 'Hello Journal!',
            'timestamp': timestamp,
        }),
        'cbtRecords': ('placeholder_cbt', {
            'userId': 'placeholder_user',
            'answers': ['example answer'],
            'timestamp': timestamp,
        }),
        'groundingSessions': ('placeholder_grounding', {
            'userId': 'placeholder_user',
            'details': 'Some grounding details',
            'timestamp': timestamp,
        }),
        'subjects': ('placeholder_subject', {
            'name': 'Placeholder Subject',
            'icon': 'placeholder.png',
            'order': 1,
        }),
        'chapters': ('placeholder_chapter', {
            'subjectId': 'placeholder_subject',
            'name': 'Placeholder Chapter',
            'order': 1,
        }),
        'notes': ('placeholder_note', {
            'userId': 'placeholder_user',
            'subjectId': 'placeholder_subject',
            'chapterId': 'placeholder_chapter',
            'content': 'Note content here',
            'createdAt': timestamp,
        }),
        'tests': ('placeholder_test', {
            'subjectId': 'placeholder_subject',
            'chapterId': 'placeholder_chapter',
            'questions': ['What is 2+2?'],
            'createdBy': 'admin',
            'createdAt': timestamp,
        }),
        'pdfs': ('placeholder_pdf', {
            'subjectId': 'placeholder_subject',
            'chapterId': 'placeholder_chapter',
            'fileUrl': 'https://example.com/placeholder.pdf',
            'title': 'Placeholder PDF',
            'uploadedBy': 'admin',
            'uploadedAt': timestamp,
        }),
        'wellnessTips': ('placeholder_tip', {
            'text': 'Drink water and take deep breaths.',
            'author': 'System',
            'date': timestamp,
        }),
        'emergencyResources': ('placeholder_resource', {
            'name': 'Placeholder Helpline',
            'phone': '123-456-7890',
            'url': 'https://placeholder.org',
            'description': 'A placeholder emergency resource.',
        }),
    }


KNOWN_COLLECTIONS = list(placeholder_documents())


@dataclass
class ResetReport:
    collections_purged: list = field(default_factory=list)
    documents_deleted: int = 0
    collections_reseeded: list = field(default_factory=list)
    errors: dict = field(default_factory=dict)

    @property
    def ok(self):
        return not self.errors

    def to_dict(self):
        return {
            "collectionsPurged": list(self.collections_purged),
            "documentsDeleted": self.documents_deleted,
            "collectionsReseeded": list(self.collections_reseeded),
            "errors": dict(self.errors),
            "success": self.ok,
        }


class DatabaseResetOrchestrator:
    """Purges every discovered collection, then reseeds the known ones with placeholders."""

    def __init__(self, store, purger=None, placeholders=None):
        self.store = store
        self.purger = purger or BatchCollectionPurger(store)
        self.placeholders = placeholders if placeholders is not None else placeholder_documents()

    def reset_all(self, known_collection_names=None):
        """
        Runs one full reset and returns a ResetReport.

        Discovery errors propagate. Purge and reseed errors are recorded per
        collection and the remaining collections are still processed.
        Collections that are already empty are not discovered and so are not
        purged; they still receive a placeholder if they are in the known list.
        """
        if known_collection_names is None:
            known_collection_names = list(self.placeholders)
        report = ResetReport()

        logger.info("Listing top-level collections...")
        collections = self.store.list_collections()
        logger.info(f"Found {len(collections)} collections: {', '.join(collections) or '(none)'}")

        for name in collections:
            logger.warning(f"Deleting all docs in collection: {name}")
            try:
                report.documents_deleted += self.purger.purge(name)
                report.collections_purged.append(name)
            except Exception as e:
                logger.error(f"Could not purge collection '{name}': {e}")
                report.errors[name] = str(e)

        logger.info("Creating placeholder docs...")
        for name in known_collection_names:
            key = f"{name} (reseed)"
            if name not in self.placeholders:
                logger.error(f"No placeholder defined for collection '{name}'.")
                report.errors[key] = "No placeholder defined for this collection."
                continue
            doc_id, data = self.placeholders[name]
            try:
                self.store.set_document(name, doc_id, dict(data))
                report.collections_reseeded.append(name)
            except Exception as e:
                logger.error(f"Could not reseed collection '{name}': {e}")
                report.errors[key] = str(e)

        logger.info(
            f"Reset finished: {len(report.collections_purged)} purged, "
            f"{report.documents_deleted} documents deleted, "
            f"{len(report.collections_reseeded)} reseeded, {len(report.errors)} errors."
        )
        return report


def build_reset_orchestrator(db, page_size=None):
    """Orchestrator over a Firestore client, with retries on every store call."""
    policy = RetryPolicy(max_attempts=config.retry_attempts(), initial_delay=config.retry_delay())
    store = RetryingStore(FirestoreStore(db), policy)
    purger = BatchCollectionPurger(store, config.reset_page_size() if page_size is None else page_size)
    return DatabaseResetOrchestrator(store, purger)
