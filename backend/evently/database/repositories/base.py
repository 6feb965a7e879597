"""
BaseRepository

Base class for MongoDB repositories providing common CRUD operations.

Methods:
- find_by_id(id) -> Optional[record]: Find single document
- find_many(filter, limit, skip) -> list[record]
- count(filter) -> int
- delete(id) -> bool: Delete document

Subclasses set collection_name/record_class and own their write paths,
since every write must pass through explicit validation first.
"""

import logging
from typing import Any, Generic, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from evently.models.base import TimestampedRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=TimestampedRecord)


def parse_object_id(value: Any) -> ObjectId | None:
    """Return the ObjectId for a string id, or None if it is not one."""
    if isinstance(value, ObjectId):
        return value
    if value is None or not ObjectId.is_valid(str(value)):
        return None
    return ObjectId(str(value))


class BaseRepository(Generic[RecordT]):
    """Common read/delete operations over one collection."""

    collection_name: str = ""
    record_class: type[RecordT]

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.db[self.collection_name]

    async def find_by_id(self, record_id: str) -> RecordT | None:
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid})
        return self.record_class.from_document(doc) if doc else None

    async def find_many(
        self,
        filter: dict[str, Any] | None = None,
        limit: int = 100,
        skip: int = 0,
    ) -> list[RecordT]:
        cursor = self.collection.find(filter or {}, skip=skip, limit=limit)
        docs = await cursor.to_list(length=limit)
        return [self.record_class.from_document(doc) for doc in docs]

    async def count(self, filter: dict[str, Any] | None = None) -> int:
        return await self.collection.count_documents(filter or {})

    async def delete(self, record_id: str) -> bool:
        oid = parse_object_id(record_id)
        if oid is None:
            return False
        result = await self.collection.delete_one({"_id": oid})
        deleted = result.deleted_count > 0
        if deleted:
            logger.info(f"Deleted {self.collection_name} document {record_id}")
        return deleted

    async def _insert(self, record: RecordT) -> RecordT:
        """Stamp and insert a prepared record, returning it with its new id."""
        stamped = record.stamped()
        result = await self.collection.insert_one(stamped.to_document())
        return stamped.model_copy(update={"id": str(result.inserted_id)})

    async def _replace(self, record: RecordT) -> RecordT:
        """Stamp and replace a prepared, already persisted record."""
        stamped = record.stamped()
        await self.collection.replace_one({"_id": ObjectId(stamped.id)}, stamped.to_document())
        return stamped
