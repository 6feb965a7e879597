"""
Database module initialization.
Exports database components for use throughout the application.
"""

from evently.database.connection import (
    ConnectionCache,
    close_db,
    connection_cache,
    init_db,
    sanitize_mongodb_uri,
)
from evently.database.indexes import BOOKINGS_COLLECTION, EVENTS_COLLECTION, ensure_indexes
from evently.database.repositories import BookingRepository, EventRepository

__all__ = [
    # Connection management
    "ConnectionCache",
    "connection_cache",
    "init_db",
    "close_db",
    # Indexes
    "ensure_indexes",
    "EVENTS_COLLECTION",
    "BOOKINGS_COLLECTION",
    # Repositories
    "EventRepository",
    "BookingRepository",
    # Utilities
    "sanitize_mongodb_uri",
]
