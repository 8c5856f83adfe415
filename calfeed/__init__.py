"""iCal feed generation and validation for calendar events."""

from calfeed.config import FeedConfig
from calfeed.feed_builder import CalendarFeedBuilder
from calfeed.ics_format import escape_text
from calfeed.icons import EventCategory, EventPriority, IconClassifier
from calfeed.models import CalendarStats, EventRecord, ValidationReport

__all__ = [
    "CalendarFeedBuilder",
    "CalendarStats",
    "EventCategory",
    "EventPriority",
    "EventRecord",
    "FeedConfig",
    "IconClassifier",
    "ValidationReport",
    "escape_text",
]
