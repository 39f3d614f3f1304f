from typing import Callable, Iterable, List
from index_audit.config.config import DISALLOWED_INDEX_TYPE, PROTECTED_INDEX_NAME
from index_audit.database.database import Database
from index_audit.database.errors import StoreConnectionError, StoreError
from index_audit.models import (
    AuditReport,
    Classification,
    ClassifiedIndex,
    CollectionAuditRecord,
    DiscoveredCollection,
    DropError,
    IndexDescriptor,
)
from index_audit.services.discovery import discover_indexes
from index_audit.utils.logger import CustomLogger

logger = CustomLogger("index_auditor")

def classify(descriptor: IndexDescriptor) -> Classification:
    """Classify an index by the type tokens of its key spec."""
    if any(value == DISALLOWED_INDEX_TYPE for value in descriptor.key_spec.values()):
        return Classification.DISALLOWED_TEXT
    return Classification.ALLOWED

class IndexAuditor:
    """Classifies the indexes of a collection and drops the disallowed ones."""

    def __init__(self, store, dry_run: bool = False):
        self.store = store
        self.dry_run = dry_run

    def audit(self, collection_name: str, descriptors: Iterable[IndexDescriptor]) -> CollectionAuditRecord:
        """Audit one collection and drop its text indexes.

        Drops are attempted one by one in listing order. A failed drop is
        recorded and the remaining drops still run. The primary-key index is
        never dropped.
        """
        indexes = [
            ClassifiedIndex(descriptor=descriptor, classification=classify(descriptor))
            for descriptor in descriptors
        ]
        targets = []
        for index in indexes:
            name = index.descriptor.name
            if index.classification != Classification.DISALLOWED_TEXT:
                logger.info(f"  {name}: {index.descriptor.key_spec}")
                continue
            logger.warning(f"  TEXT INDEX FOUND: {name} {index.descriptor.key_spec}")
            if name != PROTECTED_INDEX_NAME and name not in targets:
                targets.append(name)

        dropped_names: List[str] = []
        drop_errors: List[DropError] = []
        skipped_names: List[str] = []

        for name in targets:
            if self.dry_run:
                logger.info(f"  Dry run, keeping {name}")
                skipped_names.append(name)
                continue
            try:
                self.store.drop_index(collection_name, name)
            except StoreError as e:
                logger.error(f"  Error dropping index {name}: {e.message}")
                drop_errors.append(DropError(name=name, message=e.message))
                continue
            logger.info(f"  Dropped: {name}")
            dropped_names.append(name)

        return CollectionAuditRecord(
            collection_name=collection_name,
            indexes=indexes,
            dropped_names=dropped_names,
            drop_errors=drop_errors,
            skipped_names=skipped_names,
        )

    def audit_discovered(self, discovered: DiscoveredCollection) -> CollectionAuditRecord:
        logger.info(f"=== Collection: {discovered.name} ===")
        if discovered.list_error is not None:
            return CollectionAuditRecord(
                collection_name=discovered.name,
                note=f"Indexes could not be listed: {discovered.list_error}",
            )
        return self.audit(discovered.name, discovered.indexes)

def run_audit(store_factory: Callable = Database, dry_run: bool = False) -> AuditReport:
    """Run one full audit-and-remediate pass over the configured database.

    The store is opened once and closed when the pass ends, whether it
    completes or fails. A connection failure is returned in the report
    together with the records completed before it.
    """
    records: List[CollectionAuditRecord] = []
    try:
        with store_factory() as store:
            auditor = IndexAuditor(store, dry_run=dry_run)
            for discovered in discover_indexes(store):
                records.append(auditor.audit_discovered(discovered))
    except StoreConnectionError as e:
        logger.error(f"Error connecting to store: {e.message}")
        return AuditReport(records=records, connection_error=e.message, dry_run=dry_run)
    return AuditReport(records=records, dry_run=dry_run)
