import logging
import random
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)


def _midnight(today=None):
    today = today or datetime.now().astimezone()
    return today.replace(hour=0, minute=0, second=0, microsecond=0)


def get_user_uid_by_email(db, email):
    """Looks up a user document id by email in the 'users' collection."""
    results = db.collection('users').where('email', '==', email).limit(1).get()
    if not results:
        raise LookupError("User not found!")
    return results[0].id


def create_sample_data_for_user(db, uid, days=14, today=None, rng=None):
    """
    Writes `days` days of mood history for a user, newest first.

    Each day gets a moodEntries document and a matching 'mood' activity; every
    third day also gets a 'journal' activity. Returns the number of documents written.
    """
    rng = rng or random.Random()
    mood_entries_ref = db.collection('moodEntries')
    activities_ref = db.collection('activities')
    start = _midnight(today)
    written = 0

    for i in range(days):
        date = start - timedelta(days=i)
        mood = rng.randint(1, 10)

        mood_entries_ref.add({
            'userId': uid,
            'rating': mood,
            'date': date,
            'timestamp': date,
        })
        activities_ref.add({
            'userId': uid,
            'type': 'mood',
            'moodValue': mood,
            'timestamp': date,
        })
        written += 2

        if i % 3 == 0:
            activities_ref.add({
                'userId': uid,
                'type': 'journal',
                'timestamp': date,
            })
            written += 1

    logger.info(f"Sample data created for user {uid} ({days} days)")
    return written


def create_streak_activities(db, uid, days=10, today=None, rng=None):
    """Writes one 'mood' activity per consecutive day ending today."""
    rng = rng or random.Random()
    activities_ref = db.collection('activities')
    start = _midnight(today)

    for i in range(days):
        date = start - timedelta(days=i)
        # Both fields are set; older app screens read 'date', newer ones 'timestamp'
        activities_ref.add({
            'userId': uid,
            'type': 'mood',
            'moodValue': rng.randint(1, 10),
            'timestamp': date,
            'date': date,
        })

    logger.info(f"Created {days} consecutive daily activities for user {uid}")
    return days


def create_catalog_sample(db, today=None):
    """
    Seeds one branch of the nested textbook/test catalog:
    boards/{id}/standards/{id}/subjects/{id}/chapters/{id}/tests/{id}.

    Every level gets a store-assigned id. Returns the list of created document paths.
    """
    created_at = today or datetime.now().astimezone()

    board_ref = db.collection('boards').document()
    board_ref.set({'name': 'CBSE', 'createdAt': created_at})

    standard_ref = board_ref.collection('standards').document()
    standard_ref.set({'name': 'Class 10', 'createdAt': created_at})

    subject_ref = standard_ref.collection('subjects').document()
    subject_ref.set({'name': 'Mathematics', 'createdAt': created_at})

    chapter_ref = subject_ref.collection('chapters').document()
    chapter_ref.set({'name': 'Algebra', 'createdAt': created_at})

    test_ref = chapter_ref.collection('tests').document()
    test_ref.set({
        'title': 'Algebra Test',
        'description': 'Test on Algebra concepts',
        'Duration': 30,
        'questions': [],
        'createdAt': created_at,
    })

    paths = [ref.path for ref in (board_ref, standard_ref, subject_ref, chapter_ref, test_ref)]
    logger.info(f"Catalog sample created: {paths[-1]}")
    return paths


def duplicate_document(db, collection, doc_id, suffix=' (Copy)'):
    """Copies a document into a new auto-id document, appending `suffix` to its title."""
    source_doc = db.collection(collection).document(doc_id).get()
    if not source_doc.exists:
        raise LookupError(f"Document {doc_id} not found in '{collection}'!")

    data = source_doc.to_dict() or {}
    data['title'] = f"{data.get('title', '')}{suffix}"

    _, new_ref = db.collection(collection).add(data)
    logger.info(f"Document duplicated successfully with new ID: {new_ref.id}")
    return new_ref.id
