"""Tests for Pydantic models."""

from datetime import date, datetime, time

import pytest
from pydantic import ValidationError

from calfeed.models.event import EventRecord
from calfeed.models.validation import ValidationReport

STAMP = datetime(2025, 1, 1, 12, 0, 0)


def record(**overrides) -> EventRecord:
    data = {
        "id": 1,
        "title": "Paper bin",
        "event_date": "2025-03-15",
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    data.update(overrides)
    return EventRecord.model_validate(data)


def test_event_record_creation():
    """Test basic record creation from storage values."""
    event = record(event_time="07:30:00", icon="reminder", description="Put it out")
    assert event.event_date == date(2025, 3, 15)
    assert event.event_time == time(7, 30)
    assert event.icon == "reminder"
    assert event.is_all_day is False


@pytest.mark.parametrize(
    "value,expected",
    [
        ("09:15", time(9, 15)),
        ("09:15:30", time(9, 15, 30)),
        ("0915", time(9, 15)),
        ("", None),
        (None, None),
        (time(18, 0), time(18, 0)),
    ],
)
def test_event_time_conversion(value, expected):
    """Test time string conversion."""
    assert record(event_time=value).event_time == expected


def test_invalid_event_time():
    with pytest.raises(ValidationError):
        record(event_time="25:99")


def test_all_day_event():
    event = record()
    assert event.event_time is None
    assert event.is_all_day is True


def test_default_icon():
    assert record().icon == "calendar"
    assert record(icon=None).icon == "calendar"
    assert record(icon="").icon == "calendar"


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"title": "x" * 256},
        {"description": "x" * 1001},
        {"event_date": "not-a-date"},
    ],
)
def test_invalid_records_rejected(overrides):
    with pytest.raises(ValidationError):
        record(**overrides)


def test_event_record_is_immutable():
    event = record()
    with pytest.raises(ValidationError):
        event.title = "Changed"


def test_validation_report_validity():
    """Test that warnings never affect validity."""
    assert ValidationReport().is_valid is True
    assert ValidationReport(warnings=["long line"]).is_valid is True
    assert ValidationReport(errors=["Missing PRODID"]).is_valid is False


def test_validation_report_dump_includes_is_valid():
    dumped = ValidationReport(errors=["Missing PRODID"]).model_dump()
    assert dumped == {"errors": ["Missing PRODID"], "warnings": [], "is_valid": False}
