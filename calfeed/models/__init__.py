"""Pydantic models for calendar feeds."""

from calfeed.models.event import DEFAULT_ICON, EventRecord
from calfeed.models.stats import CalendarStats
from calfeed.models.validation import ValidationReport

__all__ = [
    "DEFAULT_ICON",
    "EventRecord",
    "CalendarStats",
    "ValidationReport",
]
