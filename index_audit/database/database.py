from typing import List, Optional
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.errors import (
    ConfigurationError,
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
)
from index_audit.config.config import (
    MONGODB_URI,
    MONGODB_DB,
    MONGODB_TIMEOUT_MS,
    INDEX_NOT_FOUND_CODE,
)
from index_audit.database.errors import (
    IndexNotFound,
    ListIndexesError,
    StoreConnectionError,
    StoreError,
)
from index_audit.models import IndexDescriptor
from index_audit.utils.logger import CustomLogger

logger = CustomLogger("database")

def error_message(error: Exception) -> str:
    """Short server message of a pymongo error, without the raw reply."""
    if isinstance(error, OperationFailure) and error.details:
        return error.details.get("errmsg") or str(error)
    return str(error)

def is_index_not_found(error: OperationFailure) -> bool:
    if error.code == INDEX_NOT_FOUND_CODE:
        return True
    # Servers older than 4.2 answer without a code
    return "index not found" in error_message(error).lower()

class Database:
    """Store backed by one MongoClient.

    The connection is checked with a ping on construction so that an
    unreachable server or rejected credentials fail the run before any
    collection is touched. Use as a context manager to release the client
    on every exit path.
    """

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None,
                 timeout_ms: int = MONGODB_TIMEOUT_MS):
        self.db_name = db_name or MONGODB_DB
        self.client = None
        try:
            self.client = MongoClient(uri or MONGODB_URI, serverSelectionTimeoutMS=timeout_ms)
            self.client.admin.command("ping")
        except (ConnectionFailure, OperationFailure, ConfigurationError) as e:
            self.close()
            raise StoreConnectionError(f"Cannot connect to MongoDB: {error_message(e)}") from e
        self.db = self.client[self.db_name]
        logger.info(f"Connected to MongoDB database '{self.db_name}'")

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def list_collections(self) -> List[str]:
        """Names of all collections in the database. Views are skipped."""
        try:
            return self.db.list_collection_names(filter={"type": {"$ne": "view"}})
        except PyMongoError as e:
            raise StoreConnectionError(f"Cannot list collections: {error_message(e)}") from e

    def list_indexes(self, collection_name: str) -> List[IndexDescriptor]:
        try:
            documents = list(self.db[collection_name].list_indexes())
            return [IndexDescriptor.from_document(document) for document in documents]
        except (PyMongoError, ValidationError) as e:
            raise ListIndexesError(collection_name, error_message(e)) from e

    def drop_index(self, collection_name: str, index_name: str) -> None:
        try:
            self.db[collection_name].drop_index(index_name)
        except OperationFailure as e:
            if is_index_not_found(e):
                raise IndexNotFound(error_message(e)) from e
            raise StoreError(error_message(e)) from e
        except PyMongoError as e:
            raise StoreError(error_message(e)) from e

    def close(self):
        """Close database connection."""
        if self.client is not None:
            self.client.close()
            self.client = None
