import logging

logger = logging.getLogger(__name__)

# Firestore rejects batches with more than 500 writes.
MAX_BATCH_SIZE = 500


def validate_page_size(page_size):
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValueError(f"Page size must be an integer, got {page_size!r}.")
    if not 1 <= page_size <= MAX_BATCH_SIZE:
        raise ValueError(f"Page size must be between 1 and {MAX_BATCH_SIZE}, got {page_size}.")
    return page_size


class BatchCollectionPurger:
    """
    Deletes every document in a collection, one page per atomic batch.

    Pages are fetched and committed strictly in order. A short page means the
    collection is empty; a full page always triggers one more fetch, so a
    collection whose size is a multiple of the page size costs one extra
    (empty) read. Documents inserted concurrently by another writer may
    survive the purge.
    """

    def __init__(self, store, page_size=100):
        self.store = store
        self.page_size = validate_page_size(page_size)

    def purge(self, collection, page_size=None):
        """Empties `collection` and returns the number of documents deleted.

        A failed batch commit propagates; pages committed before it stay deleted,
        so calling purge again simply carries on with what is left.
        """
        page_size = self.page_size if page_size is None else validate_page_size(page_size)
        deleted = 0

        while True:
            doc_ids = self.store.fetch_page(collection, page_size)
            if not doc_ids:
                break

            try:
                self.store.delete_batch(collection, doc_ids)
            except Exception as e:
                logger.error(f"Batch delete failed in '{collection}' after {deleted} documents: {e}")
                raise
            deleted += len(doc_ids)
            logger.info(f"Deleted {len(doc_ids)} documents from '{collection}' ({deleted} so far).")

            if len(doc_ids) < page_size:
                break

        logger.info(f"Collection '{collection}' cleared, {deleted} documents deleted.")
        return deleted
