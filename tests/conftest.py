"""
Pytest configuration and shared fixtures

FakeStore stands in for the MongoDB-backed Database: it keeps raw index
documents per collection, records every drop call and can be told to fail
specific operations.
"""
import pytest
from index_audit.database.errors import (
    IndexNotFound,
    ListIndexesError,
    StoreConnectionError,
    StoreError,
)
from index_audit.models import IndexDescriptor


class FakeStore:
    def __init__(self, collections=None):
        self.collections = {
            name: [dict(document) for document in documents]
            for name, documents in (collections or {}).items()
        }
        self.drop_failures = {}
        self.list_failures = {}
        self.connection_failure = None
        self.drop_calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def fail_drop(self, collection_name, index_name, error):
        self.drop_failures[(collection_name, index_name)] = error

    def list_collections(self):
        if self.connection_failure is not None:
            raise StoreConnectionError(self.connection_failure)
        return list(self.collections)

    def list_indexes(self, collection_name):
        if collection_name in self.list_failures:
            raise ListIndexesError(collection_name, self.list_failures[collection_name])
        return [IndexDescriptor.from_document(document) for document in self.collections[collection_name]]

    def drop_index(self, collection_name, index_name):
        self.drop_calls.append((collection_name, index_name))
        error = self.drop_failures.get((collection_name, index_name))
        if error is not None:
            raise error
        documents = self.collections[collection_name]
        remaining = [document for document in documents if document["name"] != index_name]
        if len(remaining) == len(documents):
            raise IndexNotFound(f"index not found with name [{index_name}]")
        self.collections[collection_name] = remaining

    def close(self):
        self.closed = True


ID_INDEX = {"v": 2, "key": {"_id": 1}, "name": "_id_"}


@pytest.fixture
def store():
    """Store with one collection holding a text index, one without and one with two."""
    return FakeStore({
        "users": [
            ID_INDEX,
            {"v": 2, "key": {"name": "text"}, "name": "name_text", "default_language": "english",
             "weights": {"name": 1}, "textIndexVersion": 3},
        ],
        "logs": [
            ID_INDEX,
            {"v": 2, "key": {"ts": 1}, "name": "ts_idx"},
        ],
        "orders": [
            ID_INDEX,
            {"v": 2, "key": {"title": "text"}, "name": "title_text"},
            {"v": 2, "key": {"customer": 1, "notes": "text"}, "name": "customer_1_notes_text"},
            {"v": 2, "key": {"createdAt": -1}, "name": "createdAt_-1"},
        ],
    })


@pytest.fixture
def lock_timeout():
    return StoreError("lock timeout")
