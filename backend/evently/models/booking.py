"""
Booking record for the 'bookings' collection.

Schema Fields:
- _id: ObjectId
- event_id: ObjectId of the booked event (not a cascading reference)
- email: Attendee email, trimmed and lower-cased
- created_at / updated_at: System-maintained timestamps

Indexes:
- event_id
"""

from typing import ClassVar

from evently.models.base import TimestampedRecord


class BookingRecord(TimestampedRecord):
    """A single attendee's booking for an event."""

    event_id: str | None = None
    email: str | None = None

    object_id_fields: ClassVar[tuple[str, ...]] = ("event_id",)

    def __repr__(self) -> str:
        return f"<Booking {self.email} -> {self.event_id}>"
