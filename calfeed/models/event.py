"""Event record model with Pydantic v2 validation."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

DEFAULT_ICON = "calendar"


class EventRecord(BaseModel):
    """A stored calendar event as handed over by the storage layer.

    Records are immutable. Field constraints mirror the checks the API layer
    applies before an event is stored.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str = Field(min_length=1, max_length=255)
    event_date: date
    event_time: Optional[time] = None
    icon: str = DEFAULT_ICON
    description: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime
    updated_at: datetime

    @field_validator("event_time", mode="before")
    @classmethod
    def convert_time_string(cls, v):
        """Accept HH:MM, HH:MM:SS and HHMM strings; empty means all-day."""
        if v is None or isinstance(v, time):
            return v
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            # Handle HHMM format (e.g., "1230" -> 12:30)
            if len(v) == 4 and v.isdigit():
                return time(int(v[:2]), int(v[2:]))
        return v

    @field_validator("icon", mode="before")
    @classmethod
    def default_icon(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ICON
        return v

    @computed_field
    @property
    def is_all_day(self) -> bool:
        """True if the event has no time of day."""
        return self.event_time is None
