"""Explicit pre-write validation for events and bookings."""

from evently.validation.booking import EMAIL_RE, check_booking, normalize_email, prepare_booking
from evently.validation.event import check_event, prepare_event
from evently.violations import Violation

__all__ = [
    "Violation",
    "check_event",
    "prepare_event",
    "check_booking",
    "prepare_booking",
    "normalize_email",
    "EMAIL_RE",
]
