"""Custom exceptions for the Evently data-access layer."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evently.violations import Violation


class EventlyError(Exception):
    """Base exception for Evently errors."""

    pass


class RecordValidationError(EventlyError):
    """A write was rejected because the record failed validation."""

    def __init__(self, message: str, violations: "list[Violation] | None" = None):
        super().__init__(message)
        self.violations = list(violations or [])


class InvalidTimeError(RecordValidationError):
    """Hour or minute out of range for the matched time grammar."""

    pass


class UnrecognizedTimeFormatError(RecordValidationError):
    """Time text matches neither the 24-hour nor the 12-hour grammar."""

    pass


class InvalidDateError(RecordValidationError):
    """Date text could not be parsed."""

    pass


class ReferencedEventNotFoundError(RecordValidationError):
    """Booking references an event that does not exist."""

    pass


class DuplicateSlugError(RecordValidationError):
    """Another event already uses this slug."""

    pass


class RecordNotFoundError(EventlyError):
    """Record to update does not exist."""

    pass


class MissingConfigurationError(EventlyError):
    """Required configuration value is not set."""

    pass


class DatabaseNotConnectedError(EventlyError):
    """Database used before a connection was established."""

    pass
