"""
Event record for the 'events' collection.

Schema Fields:
- _id: ObjectId
- title: Display title
- slug: URL-safe identifier derived from title (unique)
- description, overview, image, venue, location, organizer: Trimmed text
- date: Canonical ISO-8601 timestamp string (input may be text, date or datetime)
- time: Canonical 24-hour HH:MM
- mode: e.g. "online", "offline", "hybrid"
- audience: Intended audience
- agenda: Ordered agenda items
- tags: Distinct tags
- created_at / updated_at: System-maintained timestamps

Indexes:
- slug (unique)
"""

import datetime

from evently.models.base import TimestampedRecord

# Text fields that must be present and non-blank, in validation order
EVENT_TEXT_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

EVENT_LIST_FIELDS: tuple[str, ...] = ("agenda", "tags")


class EventRecord(TimestampedRecord):
    """An event that attendees can book."""

    title: str | None = None
    slug: str | None = None
    description: str | None = None
    overview: str | None = None
    image: str | None = None
    venue: str | None = None
    location: str | None = None
    # Text, or a date/datetime object; stored as canonical ISO text
    date: str | datetime.datetime | datetime.date | None = None
    time: str | None = None
    mode: str | None = None
    audience: str | None = None
    agenda: list[str] | None = None
    organizer: str | None = None
    tags: list[str] | None = None

    def __repr__(self) -> str:
        return f"<Event {(self.title or '')[:50]} ({self.slug})>"
