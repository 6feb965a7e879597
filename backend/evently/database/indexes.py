"""
MongoDB Index Definitions

Indexes by Collection:
- events: slug (unique)
- bookings: event_id

Duplicate slugs are rejected by the unique index, not by a read-before-write.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

logger = logging.getLogger(__name__)

EVENTS_COLLECTION = "events"
BOOKINGS_COLLECTION = "bookings"


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create all required indexes. Safe to call repeatedly."""
    await db[EVENTS_COLLECTION].create_index([("slug", ASCENDING)], unique=True, name="slug_unique")
    await db[BOOKINGS_COLLECTION].create_index([("event_id", ASCENDING)], name="event_id")
    logger.info("Ensured indexes on events and bookings")
