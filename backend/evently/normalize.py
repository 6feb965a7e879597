"""Derived-value normalization for event records.

Provides:
- slugify: URL-safe identifier from a display title
- normalize_time: free-form time of day to 24-hour HH:MM
- normalize_date: parseable date text to a canonical UTC ISO-8601 string
"""

import re
from datetime import date, datetime, time, timezone

from evently.exceptions import (
    InvalidDateError,
    InvalidTimeError,
    UnrecognizedTimeFormatError,
)
from evently.violations import Violation

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_EDGE_HYPHENS_RE = re.compile(r"^-+|-+$")
_HYPHEN_RUN_RE = re.compile(r"-+")

_TIME_24H_RE = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
_TIME_12H_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)$", re.ASCII)

# Tried in order after ISO-8601 parsing fails
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%b %d, %Y",
    "%b %d %Y",
    "%B %d, %Y",
    "%B %d %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y %H:%M",
    "%B %d, %Y %H:%M",
)


def slugify(value: str) -> str:
    """Convert text into a lowercase, hyphen-separated slug."""
    slug = _NON_ALNUM_RE.sub("-", str(value).lower().strip())
    slug = _EDGE_HYPHENS_RE.sub("", slug)
    return _HYPHEN_RUN_RE.sub("-", slug)


def _format_hhmm(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def normalize_time(value: str) -> str:
    """
    Normalize a time of day into 24-hour HH:MM.

    Accepts "14:30", "2:05", "2:30 pm", "2pm", "12 AM".

    Raises:
        InvalidTimeError: hour or minute out of range for the matched format
        UnrecognizedTimeFormatError: text matches no supported format
    """
    text = str(value).strip().lower()

    match = _TIME_24H_RE.match(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise _invalid_time(value)
        return _format_hhmm(hour, minute)

    match = _TIME_12H_RE.match(text)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2)) if match.group(2) else 0
        if not (1 <= hour <= 12 and 0 <= minute <= 59):
            raise _invalid_time(value)
        period = match.group(3)
        if period == "pm" and hour != 12:
            hour += 12
        elif period == "am" and hour == 12:
            hour = 0
        return _format_hhmm(hour, minute)

    raise UnrecognizedTimeFormatError(
        "Unrecognized time format",
        [Violation(field="time", kind="malformed", message=f"Unrecognized time format: {value!r}")],
    )


def _invalid_time(value: str) -> InvalidTimeError:
    return InvalidTimeError(
        "Invalid time",
        [Violation(field="time", kind="malformed", message=f"Invalid time: {value!r}")],
    )


def _parse_datetime(text: str) -> datetime | None:
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def to_iso_string(dt: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with millisecond precision and a Z suffix."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_date(value: str | date | datetime) -> str:
    """
    Parse a date and return its canonical ISO-8601 string.

    Accepts date text as well as date and datetime objects. Naive inputs are
    interpreted as UTC.

    Raises:
        InvalidDateError: value could not be parsed or is outside the UTC range
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time(), tzinfo=timezone.utc)
    else:
        parsed = _parse_datetime(str(value).strip())

    if parsed is not None:
        try:
            return to_iso_string(parsed)
        except (OverflowError, ValueError):
            pass

    raise InvalidDateError(
        "Invalid date",
        [Violation(field="date", kind="malformed", message=f"Invalid date: {value!r}")],
    )
