from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict

class Classification(str, Enum):
    """Policy class of an index, derived from its key spec only."""
    DISALLOWED_TEXT = "DISALLOWED_TEXT"
    ALLOWED = "ALLOWED"

class IndexDescriptor(BaseModel):
    """Snapshot of one index as returned by listIndexes.

    The raw server document maps straight onto this model: ``key`` becomes
    ``key_spec`` (field order preserved) and everything else the server
    reports besides ``name`` and ``default_language`` is ignored.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    name: str
    key_spec: Dict[str, Any] = Field(alias="key")
    default_language: Optional[str] = None

    @classmethod
    def from_document(cls, document: dict) -> "IndexDescriptor":
        """Create descriptor from a listIndexes document."""
        return cls.model_validate(dict(document))

class ClassifiedIndex(BaseModel):
    model_config = ConfigDict(frozen=True)

    descriptor: IndexDescriptor
    classification: Classification
