"""Validation and referential checks applied to every booking write."""

import logging
import re
from typing import Awaitable, Callable

from bson import ObjectId

from evently.exceptions import RecordValidationError, ReferencedEventNotFoundError
from evently.models.booking import BookingRecord
from evently.violations import Violation

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

EventExists = Callable[[str], Awaitable[bool]]


def normalize_email(value: str) -> str:
    return str(value).strip().lower()


def check_booking(record: BookingRecord) -> list[Violation]:
    """Return every field rule the booking breaks."""
    violations: list[Violation] = []

    if record.event_id is None or not str(record.event_id).strip():
        violations.append(Violation(field="event_id", kind="missing", message="event_id is required"))
    elif not ObjectId.is_valid(str(record.event_id).strip()):
        violations.append(
            Violation(field="event_id", kind="malformed", message=f"Invalid event_id: {record.event_id!r}")
        )

    if record.email is None:
        violations.append(Violation(field="email", kind="missing", message="Email is required"))
    elif not normalize_email(record.email):
        violations.append(Violation(field="email", kind="blank", message="Email is required"))
    elif not EMAIL_RE.match(normalize_email(record.email)):
        violations.append(Violation(field="email", kind="malformed", message="Invalid email address"))

    return violations


async def prepare_booking(record: BookingRecord, event_exists: EventExists) -> BookingRecord:
    """
    Validate a booking and return the normalized copy to persist.

    Field checks run first; the event lookup only happens for otherwise
    valid bookings and must succeed before the write may proceed.

    Args:
        record: Candidate booking about to be written
        event_exists: Coroutine function reporting whether an event id exists

    Raises:
        RecordValidationError: event_id or email missing or malformed
        ReferencedEventNotFoundError: no event with this id exists
    """
    violations = check_booking(record)
    if violations:
        logger.warning(f"Rejected booking: {'; '.join(map(str, violations))}")
        raise RecordValidationError("Booking validation failed", violations)

    event_id = str(record.event_id).strip()
    if not await event_exists(event_id):
        logger.warning(f"Rejected booking for missing event {event_id}")
        raise ReferencedEventNotFoundError(
            "Referenced Event does not exist",
            [Violation(field="event_id", kind="reference", message=f"Event {event_id} does not exist")],
        )

    return record.model_copy(update={"event_id": event_id, "email": normalize_email(record.email)})
