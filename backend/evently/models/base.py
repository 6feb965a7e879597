"""
Base record classes for MongoDB documents.

This module provides:
- TimestampedRecord: document id plus system-maintained created_at/updated_at
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


RecordT = TypeVar("RecordT", bound="TimestampedRecord")


class TimestampedRecord(BaseModel):
    """Base class for persisted records with automatic timestamps."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = Field(default=None, description="String form of the document _id")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Fields stored as ObjectId rather than their string form
    object_id_fields: ClassVar[tuple[str, ...]] = ()

    def stamped(self: RecordT, now: datetime | None = None) -> RecordT:
        """Return a copy with updated_at set, and created_at set if new."""
        now = now or utc_now()
        return self.model_copy(
            update={"created_at": self.created_at or now, "updated_at": now}
        )

    def to_document(self) -> dict[str, Any]:
        """Convert to a MongoDB document."""
        doc = self.model_dump(exclude={"id"})
        for name in self.object_id_fields:
            if doc.get(name) is not None:
                doc[name] = ObjectId(doc[name])
        if self.id is not None:
            doc["_id"] = ObjectId(self.id)
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]):
        """Build a record from a MongoDB document."""
        data = dict(doc)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))
        for key, value in data.items():
            if isinstance(value, ObjectId):
                data[key] = str(value)
        return cls.model_validate(data)
