from typing import Iterator
from index_audit.database.errors import ListIndexesError
from index_audit.models import DiscoveredCollection
from index_audit.utils.logger import CustomLogger

logger = CustomLogger("discovery")

def discover_indexes(store) -> Iterator[DiscoveredCollection]:
    """Yield every collection of the store with its current indexes.

    Collections are listed once, up front; indexes are fetched lazily as the
    caller advances. A collection whose indexes cannot be listed is yielded
    with ``list_error`` set. A StoreConnectionError from listing the
    collections propagates to the caller.
    """
    collection_names = store.list_collections()
    logger.info(f"Found {len(collection_names)} collections")

    for collection_name in collection_names:
        try:
            indexes = store.list_indexes(collection_name)
        except ListIndexesError as e:
            logger.error(f"Error listing indexes of {collection_name}: {e.message}")
            yield DiscoveredCollection(name=collection_name, list_error=e.message)
            continue
        logger.debug(f"{collection_name}: {[index.name for index in indexes]}")
        yield DiscoveredCollection(name=collection_name, indexes=indexes)
