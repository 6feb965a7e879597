"""
Unit Tests: Event Validation

Presence rules, slug derivation and date/time normalization before writes.
"""

from datetime import datetime, timezone

import pytest

from evently.exceptions import (
    InvalidDateError,
    InvalidTimeError,
    RecordValidationError,
    UnrecognizedTimeFormatError,
)
from evently.models import EventRecord
from evently.validation import check_event, prepare_event


def test_valid_event_has_no_violations(event_payload: dict) -> None:
    assert check_event(EventRecord(**event_payload)) == []


def test_new_event_gets_slug_and_canonical_values(event_payload: dict) -> None:
    prepared = prepare_event(EventRecord(**event_payload))

    assert prepared.slug == "my-talk"
    assert prepared.date == "2025-11-07T00:00:00.000Z"
    assert prepared.time == "14:30"
    assert prepared.description == "A talk about async Python."
    assert prepared.tags == ["python", "async"]
    assert prepared.agenda == ["Intro", "Deep dive", "Q&A"]


def test_prepare_event_does_not_modify_input(event_payload: dict) -> None:
    record = EventRecord(**event_payload)
    prepare_event(record)
    assert record.slug is None
    assert record.time == "2:30 pm"


def test_unchanged_title_keeps_existing_slug(event_payload: dict) -> None:
    stored = EventRecord(**{**event_payload, "slug": "keynote-2025"})
    candidate = stored.model_copy(update={"description": "Updated description"})

    prepared = prepare_event(candidate, previous=stored)

    assert prepared.slug == "keynote-2025"
    assert prepared.description == "Updated description"


def test_changed_title_rederives_slug(event_payload: dict) -> None:
    stored = EventRecord(**{**event_payload, "slug": "my-talk"})
    candidate = stored.model_copy(update={"title": "A Better Talk"})

    assert prepare_event(candidate, previous=stored).slug == "a-better-talk"


def test_missing_slug_is_derived_even_without_title_change(event_payload: dict) -> None:
    stored = EventRecord(**event_payload)
    assert prepare_event(stored, previous=stored).slug == "my-talk"


def test_missing_and_blank_fields_are_all_reported(event_payload: dict) -> None:
    payload = {**event_payload, "title": "   ", "agenda": [], "tags": ["  "]}
    del payload["venue"]

    violations = check_event(EventRecord(**payload))

    assert [(v.field, v.kind) for v in violations] == [
        ("title", "blank"),
        ("venue", "missing"),
        ("agenda", "blank"),
        ("tags", "blank"),
    ]


def test_prepare_event_rejects_missing_fields(event_payload: dict) -> None:
    payload = dict(event_payload)
    del payload["agenda"]

    with pytest.raises(RecordValidationError) as exc_info:
        prepare_event(EventRecord(**payload))

    assert exc_info.value.violations[0].field == "agenda"
    assert exc_info.value.violations[0].kind == "missing"


def test_prepare_event_rejects_invalid_date(event_payload: dict) -> None:
    with pytest.raises(InvalidDateError):
        prepare_event(EventRecord(**{**event_payload, "date": "someday"}))


def test_prepare_event_rejects_invalid_time(event_payload: dict) -> None:
    with pytest.raises(InvalidTimeError):
        prepare_event(EventRecord(**{**event_payload, "time": "25:00"}))


def test_prepare_event_propagates_unrecognized_time(event_payload: dict) -> None:
    with pytest.raises(UnrecognizedTimeFormatError) as exc_info:
        prepare_event(EventRecord(**{**event_payload, "time": "noon"}))

    assert exc_info.value.violations[0].field == "time"


def test_prepare_event_accepts_datetime_date(event_payload: dict) -> None:
    record = EventRecord(**{**event_payload, "date": datetime(2025, 11, 7, 9, 0, tzinfo=timezone.utc)})

    assert prepare_event(record).date == "2025-11-07T09:00:00.000Z"
