"""
EventRepository

MongoDB operations for the 'events' collection.

Specialized Methods:
- create(record): Validate, normalize and insert an event
- update(event_id, changes): Merge changes, re-validate and replace
- get_by_slug(slug): Look up an event by its slug
- exists(event_id): Referential check used by bookings
"""

import logging
from typing import Any

from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError

from evently.database.indexes import EVENTS_COLLECTION
from evently.database.repositories.base import BaseRepository, parse_object_id
from evently.exceptions import DuplicateSlugError, RecordNotFoundError, RecordValidationError
from evently.models.event import EventRecord
from evently.validation.event import prepare_event
from evently.violations import Violation, violations_from_errors

logger = logging.getLogger(__name__)


class EventRepository(BaseRepository[EventRecord]):
    """Events collection access."""

    collection_name = EVENTS_COLLECTION
    record_class = EventRecord

    async def create(self, record: EventRecord) -> EventRecord:
        """Insert a new event. Raises on any validation failure or duplicate slug."""
        prepared = prepare_event(record.model_copy(update={"id": None}))
        try:
            created = await self._insert(prepared)
        except DuplicateKeyError as e:
            raise self._duplicate_slug(prepared.slug) from e
        logger.info(f"Created event {created.id} ({created.slug})")
        return created

    async def update(self, event_id: str, changes: dict[str, Any]) -> EventRecord:
        """Apply field changes to a stored event. Raises RecordNotFoundError if missing."""
        current = await self.find_by_id(event_id)
        if current is None:
            raise RecordNotFoundError(f"Event {event_id} not found")

        try:
            candidate = EventRecord.model_validate(
                {**current.model_dump(), **changes, "id": current.id, "created_at": current.created_at}
            )
        except ValidationError as e:
            raise RecordValidationError(
                "Event validation failed", violations_from_errors(e.errors())
            ) from e
        prepared = prepare_event(candidate, previous=current)
        try:
            updated = await self._replace(prepared)
        except DuplicateKeyError as e:
            raise self._duplicate_slug(prepared.slug) from e
        logger.info(f"Updated event {updated.id} ({updated.slug})")
        return updated

    async def get_by_slug(self, slug: str) -> EventRecord | None:
        doc = await self.collection.find_one({"slug": slug})
        return EventRecord.from_document(doc) if doc else None

    async def exists(self, event_id: str) -> bool:
        oid = parse_object_id(event_id)
        if oid is None:
            return False
        return await self.collection.count_documents({"_id": oid}, limit=1) > 0

    @staticmethod
    def _duplicate_slug(slug: str | None) -> DuplicateSlugError:
        logger.warning(f"Rejected event with duplicate slug {slug!r}")
        return DuplicateSlugError(
            f"An event with slug {slug!r} already exists",
            [Violation(field="slug", kind="duplicate", message=f"Slug {slug!r} is already taken")],
        )
