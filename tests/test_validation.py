"""Tests for calendar validation."""

from datetime import time

from calfeed.validation import validate_calendar


def minimal_document(*body: str) -> str:
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//Test//EN", *body, "END:VCALENDAR"]
    return "\r\n".join(lines) + "\r\n"


def test_valid_minimal_document():
    """Test that a minimal envelope is valid."""
    report = validate_calendar(minimal_document())

    assert report.is_valid is True
    assert report.errors == []
    assert report.warnings == []


def test_generated_document_is_valid(builder, make_event, user_id):
    """Test that generator output passes validation."""
    events = [make_event(id=1), make_event(id=2, event_time=time(10, 0))]

    report = validate_calendar(builder.generate_calendar(events, user_id))

    assert report.is_valid is True


def test_truncated_document_is_invalid(builder, make_event, user_id):
    """Test that a missing END:VCALENDAR is reported."""
    document = builder.generate_calendar([make_event()], user_id)
    truncated = document.replace("END:VCALENDAR\r\n", "")

    report = validate_calendar(truncated)

    assert report.is_valid is False
    assert "Missing VCALENDAR end" in report.errors


def test_missing_begin():
    """Test that a missing BEGIN:VCALENDAR is reported."""
    document = minimal_document().replace("BEGIN:VCALENDAR\r\n", "")

    report = validate_calendar(document)

    assert report.errors == ["Missing VCALENDAR begin"]


def test_mismatched_calendar_markers():
    """Test that extra envelope markers are reported."""
    document = minimal_document() + "END:VCALENDAR\r\n"

    report = validate_calendar(document)

    assert report.errors == ["Mismatched VCALENDAR tags: 1 begin, 2 end"]


def test_invalid_version():
    """Test that a wrong VERSION is reported."""
    document = minimal_document().replace("VERSION:2.0", "VERSION:1.0")

    report = validate_calendar(document)

    assert report.errors == ["Missing or invalid VERSION"]


def test_missing_prodid():
    """Test that a missing PRODID is reported."""
    document = minimal_document().replace("PRODID:-//Test//EN\r\n", "")

    report = validate_calendar(document)

    assert report.errors == ["Missing PRODID"]


def test_unbalanced_events(builder, make_event, user_id):
    """Test that unbalanced VEVENT blocks are reported."""
    document = builder.generate_calendar([make_event(id=1), make_event(id=2)], user_id)
    broken = document.replace("END:VEVENT\r\n", "", 1)

    report = validate_calendar(broken)

    assert report.is_valid is False
    assert report.errors == ["Mismatched VEVENT tags: 2 begin, 1 end"]


def test_long_lines_are_warnings_only():
    """Test that over-long lines warn without affecting validity."""
    long_line = "X-NOTE:" + "a" * 80
    document = minimal_document(long_line)

    report = validate_calendar(document)

    assert report.is_valid is True
    assert report.warnings == ["Line 4 exceeds 75 characters (87)"]


def test_line_of_exactly_75_characters_does_not_warn():
    document = minimal_document("X-NOTE:" + "a" * 68)

    assert validate_calendar(document).warnings == []


def test_lf_only_document_is_accepted():
    """Test that documents with bare LF line endings are checked the same way."""
    document = minimal_document().replace("\r\n", "\n")

    assert validate_calendar(document).is_valid is True


def test_empty_document():
    """Test that an empty string reports every envelope error."""
    report = validate_calendar("")

    assert report.is_valid is False
    assert report.errors == [
        "Missing VCALENDAR begin",
        "Missing VCALENDAR end",
        "Missing or invalid VERSION",
        "Missing PRODID",
    ]


def test_strict_mode_reports_parse_failures():
    """Test that strict mode catches lines the structural check ignores."""
    document = minimal_document("THIS LINE HAS NO SEPARATOR")

    assert validate_calendar(document).is_valid is True
    report = validate_calendar(document, strict=True)
    assert report.is_valid is False
    assert report.errors[0].startswith("Calendar could not be parsed")
