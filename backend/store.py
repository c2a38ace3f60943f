from typing import Protocol


class StoreClient(Protocol):
    """
    The slice of a document database the purge and reset code needs.
    """

    def list_collections(self):
        """Names of the top-level collections that currently hold documents."""
        ...

    def fetch_page(self, collection, limit):
        """Ids of up to `limit` documents from the collection."""
        ...

    def delete_batch(self, collection, doc_ids):
        """Delete the given documents in one atomic batch."""
        ...

    def set_document(self, collection, doc_id, data):
        """Create or overwrite a single document."""
        ...


class FirestoreStore:
    """StoreClient backed by a firebase_admin Firestore client."""

    def __init__(self, db):
        self.db = db

    def list_collections(self):
        return [coll.id for coll in self.db.collections()]

    def fetch_page(self, collection, limit):
        docs = self.db.collection(collection).limit(limit).get()
        return [doc.id for doc in docs]

    def delete_batch(self, collection, doc_ids):
        coll_ref = self.db.collection(collection)
        batch = self.db.batch()
        for doc_id in doc_ids:
            batch.delete(coll_ref.document(doc_id))
        batch.commit()

    def set_document(self, collection, doc_id, data):
        self.db.collection(collection).document(doc_id).set(data)
