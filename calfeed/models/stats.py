"""Calendar statistics model."""

from pydantic import BaseModel

from calfeed.models.event import EventRecord


class CalendarStats(BaseModel):
    """Summary numbers for a user's calendar."""

    total_events: int
    upcoming_events: int
    events_by_category: dict[str, int]
    next_event: EventRecord | None = None
