"""Calendar statistics helpers."""

from collections import defaultdict
from datetime import date, time
from typing import Iterable

from calfeed.icons import IconClassifier
from calfeed.models.event import EventRecord
from calfeed.models.stats import CalendarStats


def upcoming_sort_key(event: EventRecord) -> tuple[date, time]:
    """Sort key for upcoming events.

    All-day events sort as midnight, i.e. before any timed event on the same
    date.
    """
    return event.event_date, event.event_time or time.min


def build_calendar_stats(events: Iterable[EventRecord], today: date) -> CalendarStats:
    """Build statistics for a list of events.

    Args:
        events: Event records in any order.
        today: Reference date; events on or after it count as upcoming.

    Returns:
        CalendarStats with counts and the next upcoming event.
    """
    events = list(events)

    upcoming = [e for e in events if e.event_date >= today]

    events_by_category: dict[str, int] = defaultdict(int)
    for event in events:
        events_by_category[IconClassifier.category(event.icon).value] += 1

    # min() keeps the first of equal keys, so input order breaks remaining ties
    next_event = min(upcoming, key=upcoming_sort_key) if upcoming else None

    return CalendarStats(
        total_events=len(events),
        upcoming_events=len(upcoming),
        events_by_category=dict(events_by_category),
        next_event=next_event,
    )
