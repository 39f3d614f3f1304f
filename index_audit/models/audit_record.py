from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from .index_descriptor import Classification, ClassifiedIndex, IndexDescriptor

class CollectionOutcome(str, Enum):
    """Terminal state of one collection's audit."""
    REMEDIATED = "REMEDIATED"
    REMEDIATION_PARTIAL = "REMEDIATION_PARTIAL"
    REMEDIATION_NOT_NEEDED = "REMEDIATION_NOT_NEEDED"
    REMEDIATION_SKIPPED = "REMEDIATION_SKIPPED"
    NOT_AUDITED = "NOT_AUDITED"

class DropError(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    message: str

class DiscoveredCollection(BaseModel):
    """A collection and the indexes listed for it at discovery time."""
    model_config = ConfigDict(frozen=True)

    name: str
    indexes: Tuple[IndexDescriptor, ...] = ()
    list_error: Optional[str] = None

class CollectionAuditRecord(BaseModel):
    """Audit result for one collection, built once and never mutated."""
    model_config = ConfigDict(frozen=True)

    collection_name: str
    indexes: Tuple[ClassifiedIndex, ...] = ()
    dropped_names: Tuple[str, ...] = ()
    drop_errors: Tuple[DropError, ...] = ()
    skipped_names: Tuple[str, ...] = ()
    note: Optional[str] = None

    @property
    def disallowed(self) -> List[ClassifiedIndex]:
        return [
            index for index in self.indexes
            if index.classification == Classification.DISALLOWED_TEXT
        ]

    @property
    def outcome(self) -> CollectionOutcome:
        if self.note is not None:
            return CollectionOutcome.NOT_AUDITED
        if self.drop_errors:
            return CollectionOutcome.REMEDIATION_PARTIAL
        if self.skipped_names:
            return CollectionOutcome.REMEDIATION_SKIPPED
        if self.dropped_names:
            return CollectionOutcome.REMEDIATED
        return CollectionOutcome.REMEDIATION_NOT_NEEDED

class AuditReport(BaseModel):
    """All collection records of one run, in discovery order."""
    model_config = ConfigDict(frozen=True)

    records: Tuple[CollectionAuditRecord, ...] = ()
    connection_error: Optional[str] = None
    dry_run: bool = False

    @property
    def succeeded(self) -> bool:
        return self.connection_error is None

    @property
    def total_indexes(self) -> int:
        return sum(len(record.indexes) for record in self.records)

    @property
    def total_disallowed(self) -> int:
        return sum(len(record.disallowed) for record in self.records)

    @property
    def total_dropped(self) -> int:
        return sum(len(record.dropped_names) for record in self.records)

    @property
    def total_errors(self) -> int:
        return sum(len(record.drop_errors) for record in self.records)
