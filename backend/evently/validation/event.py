"""Validation and normalization applied to every event write."""

import logging

from evently.exceptions import RecordValidationError
from evently.models.event import EVENT_LIST_FIELDS, EVENT_TEXT_FIELDS, EventRecord
from evently.normalize import normalize_date, normalize_time, slugify
from evently.violations import Violation

logger = logging.getLogger(__name__)


def _clean_items(items: list[str] | None, distinct: bool = False) -> list[str]:
    cleaned: list[str] = []
    for item in items or []:
        text = str(item).strip()
        if not text or (distinct and text in cleaned):
            continue
        cleaned.append(text)
    return cleaned


def check_event(record: EventRecord) -> list[Violation]:
    """Return every presence rule the record breaks, in field order."""
    violations: list[Violation] = []

    for name in EVENT_TEXT_FIELDS:
        value = getattr(record, name)
        label = name.capitalize()
        if value is None:
            violations.append(Violation(field=name, kind="missing", message=f"{label} is required"))
        elif not str(value).strip():
            violations.append(Violation(field=name, kind="blank", message=f"{label} cannot be empty"))

    for name in EVENT_LIST_FIELDS:
        items = getattr(record, name)
        label = name.capitalize()
        if items is None:
            violations.append(Violation(field=name, kind="missing", message=f"{label} is required"))
        elif not _clean_items(items):
            violations.append(
                Violation(
                    field=name,
                    kind="blank",
                    message=f"{label} must be a non-empty list of strings",
                )
            )

    return violations


def prepare_event(record: EventRecord, previous: EventRecord | None = None) -> EventRecord:
    """
    Validate an event and return the normalized copy to persist.

    The slug is re-derived from the title when the record is new, the title
    differs from `previous`, or no slug is set. Date and time are stored in
    canonical form. The input record is never modified.

    Args:
        record: Candidate event about to be written
        previous: Stored version of the event when this write is an update

    Raises:
        RecordValidationError: required fields missing or blank
        InvalidDateError: date could not be parsed
        InvalidTimeError / UnrecognizedTimeFormatError: time could not be normalized
    """
    violations = check_event(record)
    if violations:
        logger.warning(f"Rejected event {record.title!r}: {'; '.join(map(str, violations))}")
        raise RecordValidationError("Event validation failed", violations)

    updates: dict = {}
    for name in EVENT_TEXT_FIELDS:
        value = getattr(record, name)
        # date may also arrive as a date or datetime object
        updates[name] = value.strip() if isinstance(value, str) else value
    updates["agenda"] = _clean_items(record.agenda)
    updates["tags"] = _clean_items(record.tags, distinct=True)

    title_changed = previous is None or (previous.title or "").strip() != updates["title"]
    if title_changed or not record.slug:
        updates["slug"] = slugify(updates["title"])

    updates["date"] = normalize_date(updates["date"])
    updates["time"] = normalize_time(updates["time"])

    return record.model_copy(update=updates)
