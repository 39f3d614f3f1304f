from .index_descriptor import Classification, IndexDescriptor, ClassifiedIndex
from .audit_record import (
    AuditReport,
    CollectionAuditRecord,
    CollectionOutcome,
    DiscoveredCollection,
    DropError,
)

__all__ = [
    'Classification', 'IndexDescriptor', 'ClassifiedIndex',
    'AuditReport', 'CollectionAuditRecord', 'CollectionOutcome',
    'DiscoveredCollection', 'DropError',
]
