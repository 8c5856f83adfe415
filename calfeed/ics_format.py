"""Low-level RFC 5545 text helpers: escaping, value formatting, folding."""

from datetime import date, datetime, timedelta, timezone

from icalendar import vDate, vDatetime, vDuration

CRLF = "\r\n"
MAX_TEXT_LENGTH = 1000
MAX_LINE_OCTETS = 75


def escape_text(text: str | None) -> str:
    """Escape a free-text value for insertion into a content line.

    Backslashes are escaped first so the escapes added afterwards are not
    escaped again. Carriage returns are dropped and the result is capped at
    MAX_TEXT_LENGTH characters, never ending inside an escape sequence.
    """
    if not text:
        return ""
    escaped = (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
        .replace("\r", "")
    )
    truncated = escaped[:MAX_TEXT_LENGTH]
    # An odd trailing run of backslashes means the cut split an escape
    trailing = len(truncated) - len(truncated.rstrip("\\"))
    if trailing % 2:
        truncated = truncated[:-1]
    return truncated


def format_date(value: date) -> str:
    """YYYYMMDD, for VALUE=DATE properties."""
    return vDate(value).to_ical().decode("ascii")


def format_local_datetime(value: datetime) -> str:
    """Floating local time YYYYMMDDTHHMMSS, to be qualified with TZID."""
    return vDatetime(value.replace(tzinfo=None, microsecond=0)).to_ical().decode("ascii")


def format_utc(value: datetime) -> str:
    """UTC basic format YYYYMMDDTHHMMSSZ. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc).replace(microsecond=0)
    return vDatetime(value).to_ical().decode("ascii")


def format_duration(value: timedelta) -> str:
    return vDuration(value).to_ical().decode("ascii")


def fold_line(line: str, limit: int = MAX_LINE_OCTETS) -> str:
    """Fold a content line at ``limit`` octets (RFC 5545 section 3.1).

    Continuation lines start with a single space, which counts towards the
    limit. Multi-octet UTF-8 characters are never split.
    """
    if len(line.encode("utf-8")) <= limit:
        return line

    parts = []
    current = []
    current_octets = 0
    budget = limit
    for char in line:
        size = len(char.encode("utf-8"))
        if current_octets + size > budget:
            parts.append("".join(current))
            current = []
            current_octets = 0
            budget = limit - 1
        current.append(char)
        current_octets += size
    parts.append("".join(current))
    return (CRLF + " ").join(parts)


def join_lines(lines: list[str], fold: bool = False) -> str:
    """Join content lines into a document with CRLF line endings."""
    if fold:
        lines = [fold_line(line) for line in lines]
    return CRLF.join(lines) + CRLF
