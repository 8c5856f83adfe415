"""Pure formatting functions for display output."""

from rich.markup import escape

from calfeed.models.event import EventRecord


def format_event_when(event: EventRecord) -> str:
    """Format an event's date and time.

    Returns:
        "2025-01-01 09:00" for timed events, "2025-01-01 (all day)" otherwise.
    """
    date_str = event.event_date.strftime("%Y-%m-%d")
    if event.event_time is None:
        return f"{date_str} (all day)"
    return f"{date_str} {event.event_time.strftime('%H:%M')}"


def format_event(event: EventRecord | None) -> str:
    """One-line event summary, or "none" if there is no event."""
    if event is None:
        return "none"
    return f"{format_event_when(event)}  {escape(event.title)} [dim]({escape(event.icon)})[/dim]"
