"""Errors raised by the store layer.

Only ``StoreConnectionError`` is fatal to a run. The others are recovered
per collection and end up in the audit report.
"""

class IndexAuditError(Exception):
    """Base class for store errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class StoreConnectionError(IndexAuditError, ConnectionError):
    """The store cannot be reached or authenticated against."""

class ListIndexesError(IndexAuditError):
    """Listing the indexes of one collection failed."""

    def __init__(self, collection_name: str, message: str):
        super().__init__(message)
        self.collection_name = collection_name

class StoreError(IndexAuditError):
    """A store operation failed on the server side."""

class IndexNotFound(StoreError):
    """The index to drop no longer exists."""
