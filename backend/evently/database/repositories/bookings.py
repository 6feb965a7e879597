"""
BookingRepository

MongoDB operations for the 'bookings' collection.

Specialized Methods:
- create(record): Validate, confirm the event exists, insert
- update(booking_id, changes): Merge changes, re-check, replace
- list_for_event(event_id): All bookings for an event
- count_for_event(event_id): Number of bookings for an event

The event lookup and the write are separate round-trips; an event deleted
in between leaves a dangling booking.
"""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from evently.database.indexes import BOOKINGS_COLLECTION
from evently.database.repositories.base import BaseRepository, parse_object_id
from evently.database.repositories.events import EventRepository
from evently.exceptions import RecordNotFoundError, RecordValidationError
from evently.models.booking import BookingRecord
from evently.validation.booking import prepare_booking
from evently.violations import violations_from_errors

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository[BookingRecord]):
    """Bookings collection access."""

    collection_name = BOOKINGS_COLLECTION
    record_class = BookingRecord

    def __init__(self, db: AsyncIOMotorDatabase, events: EventRepository | None = None):
        super().__init__(db)
        self.events = events or EventRepository(db)

    async def create(self, record: BookingRecord) -> BookingRecord:
        """Insert a booking for an existing event."""
        prepared = await prepare_booking(record.model_copy(update={"id": None}), self.events.exists)
        created = await self._insert(prepared)
        logger.info(f"Created booking {created.id} for event {created.event_id}")
        return created

    async def update(self, booking_id: str, changes: dict[str, Any]) -> BookingRecord:
        current = await self.find_by_id(booking_id)
        if current is None:
            raise RecordNotFoundError(f"Booking {booking_id} not found")

        try:
            candidate = BookingRecord.model_validate(
                {**current.model_dump(), **changes, "id": current.id, "created_at": current.created_at}
            )
        except ValidationError as e:
            raise RecordValidationError(
                "Booking validation failed", violations_from_errors(e.errors())
            ) from e
        prepared = await prepare_booking(candidate, self.events.exists)
        updated = await self._replace(prepared)
        logger.info(f"Updated booking {updated.id}")
        return updated

    async def list_for_event(self, event_id: str, limit: int = 100, skip: int = 0) -> list[BookingRecord]:
        oid = parse_object_id(event_id)
        if oid is None:
            return []
        return await self.find_many({"event_id": oid}, limit=limit, skip=skip)

    async def count_for_event(self, event_id: str) -> int:
        oid = parse_object_id(event_id)
        if oid is None:
            return 0
        return await self.count({"event_id": oid})
