from datetime import date, datetime, time, timezone

import pytest

from calfeed.config import FeedConfig
from calfeed.feed_builder import CalendarFeedBuilder
from calfeed.models.event import EventRecord


def _make_event(
    id: int = 1,
    title: str = "Test Event",
    event_date: date = date(2025, 3, 15),
    event_time: time | None = None,
    icon: str = "event",
    description: str | None = None,
) -> EventRecord:
    """Create an EventRecord with fixed storage timestamps."""
    return EventRecord(
        id=id,
        title=title,
        event_date=event_date,
        event_time=event_time,
        icon=icon,
        description=description,
        created_at=datetime(2025, 1, 2, 10, 0, 0, tzinfo=timezone.utc),
        updated_at=datetime(2025, 1, 3, 11, 30, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_event():
    """Factory for event records."""
    return _make_event


@pytest.fixture
def frozen_now():
    return datetime(2025, 3, 10, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def user_id():
    return "a1b2c3d4e5f60718293a4b5c6d7e8f9012345678"


@pytest.fixture
def config():
    """Feed config with a fixed publish URL."""
    return FeedConfig(publish_url="https://cal.example.org")


@pytest.fixture
def builder(config, frozen_now):
    """Feed builder with a frozen clock."""
    return CalendarFeedBuilder(config, clock=lambda: frozen_now)
