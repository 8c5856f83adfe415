"""Structural sanity check for generated calendar documents.

This is a regression guard for the generator, not an RFC 5545 grammar
validator. It only looks for envelope markers, required properties, balanced
VEVENT blocks and over-long lines.
"""

import logging

from icalendar import Calendar

from calfeed.ics_format import MAX_LINE_OCTETS
from calfeed.models.validation import ValidationReport

logger = logging.getLogger(__name__)

EXPECTED_VERSION = "2.0"


def _count_markers(lines: list[str], marker: str) -> int:
    return sum(1 for line in lines if line == marker)


def validate_calendar(document: str, strict: bool = False) -> ValidationReport:
    """Check a calendar document for structural problems.

    Args:
        document: Calendar text as produced by the feed builder
        strict: Also parse the document with icalendar and report parse failures

    Returns:
        ValidationReport with errors and warnings. Long lines only produce
        warnings: unfolded output is accepted.
    """
    errors: list[str] = []
    warnings: list[str] = []

    # Tolerate LF-only documents as well as CRLF
    lines = document.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    # Envelope
    calendar_begins = _count_markers(lines, "BEGIN:VCALENDAR")
    calendar_ends = _count_markers(lines, "END:VCALENDAR")
    if calendar_begins == 0:
        errors.append("Missing VCALENDAR begin")
    if calendar_ends == 0:
        errors.append("Missing VCALENDAR end")
    if calendar_begins and calendar_ends and calendar_begins != calendar_ends:
        errors.append(
            f"Mismatched VCALENDAR tags: {calendar_begins} begin, {calendar_ends} end"
        )

    # Required properties
    if f"VERSION:{EXPECTED_VERSION}" not in lines:
        errors.append("Missing or invalid VERSION")
    if not any(line.startswith("PRODID:") for line in lines):
        errors.append("Missing PRODID")

    # Events
    event_begins = _count_markers(lines, "BEGIN:VEVENT")
    event_ends = _count_markers(lines, "END:VEVENT")
    if event_begins != event_ends:
        errors.append(f"Mismatched VEVENT tags: {event_begins} begin, {event_ends} end")

    # Line length (soft limit)
    for index, line in enumerate(lines, start=1):
        if len(line) > MAX_LINE_OCTETS:
            warnings.append(
                f"Line {index} exceeds {MAX_LINE_OCTETS} characters ({len(line)})"
            )

    if strict and not errors:
        try:
            Calendar.from_ical(document)
        except ValueError as e:
            errors.append(f"Calendar could not be parsed: {e}")

    if errors:
        logger.debug(f"Calendar validation failed: {errors}")
    elif warnings:
        logger.debug(f"Calendar valid with {len(warnings)} warning(s)")

    return ValidationReport(errors=errors, warnings=warnings)
