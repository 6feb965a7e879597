"""
Repository Pattern for MongoDB

Repositories:
- BaseRepository: Common read/delete operations
- EventRepository: Validated event writes and slug lookups
- BookingRepository: Validated booking writes with event existence checks
"""

from evently.database.repositories.base import BaseRepository, parse_object_id
from evently.database.repositories.bookings import BookingRepository
from evently.database.repositories.events import EventRepository

__all__ = ["BaseRepository", "EventRepository", "BookingRepository", "parse_object_id"]
