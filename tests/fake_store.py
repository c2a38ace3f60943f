class FakeStore:
    """
    In-memory StoreClient. Collections with no documents are invisible to
    list_collections, the same as Firestore.
    """

    def __init__(self, data=None):
        self.data = {}
        for name, docs in (data or {}).items():
            self.data[name] = dict(docs)
        self.fetches = []
        self.commits = []
        # collection -> 1-based commit number that raises
        self.fail_commit_on = {}
        self.fail_set = set()
        self.commit_error = RuntimeError("batch commit failed")

    @classmethod
    def with_documents(cls, **counts):
        return cls({
            name: {f"doc{i:05d}": {"n": i} for i in range(count)}
            for name, count in counts.items()
        })

    def count(self, collection):
        return len(self.data.get(collection, {}))

    def fetch_sizes(self, collection):
        return [size for name, size in self.fetches if name == collection]

    def commit_sizes(self, collection):
        return [size for name, size in self.commits if name == collection]

    # StoreClient

    def list_collections(self):
        return sorted(name for name, docs in self.data.items() if docs)

    def fetch_page(self, collection, limit):
        ids = sorted(self.data.get(collection, {}))[:limit]
        self.fetches.append((collection, len(ids)))
        return ids

    def delete_batch(self, collection, doc_ids):
        attempt = len(self.commit_sizes(collection)) + 1
        if self.fail_commit_on.get(collection) == attempt:
            raise self.commit_error
        docs = self.data.get(collection, {})
        for doc_id in doc_ids:
            docs.pop(doc_id, None)
        self.commits.append((collection, len(doc_ids)))

    def set_document(self, collection, doc_id, data):
        if collection in self.fail_set:
            raise RuntimeError(f"write to {collection} denied")
        self.data.setdefault(collection, {})[doc_id] = dict(data)
