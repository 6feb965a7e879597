"""
Record types for the Evently collections.

Collections:
- events: Bookable events
- bookings: Attendee bookings referencing events
"""

from evently.models.base import TimestampedRecord
from evently.models.booking import BookingRecord
from evently.models.event import EVENT_LIST_FIELDS, EVENT_TEXT_FIELDS, EventRecord

__all__ = [
    "TimestampedRecord",
    "EventRecord",
    "BookingRecord",
    "EVENT_TEXT_FIELDS",
    "EVENT_LIST_FIELDS",
]
