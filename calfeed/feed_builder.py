"""iCal feed generation for a user's events."""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterable

from calfeed.config import FeedConfig
from calfeed.icons import IconClassifier
from calfeed.ics_format import (
    escape_text,
    format_date,
    format_duration,
    format_local_datetime,
    format_utc,
    join_lines,
)
from calfeed.models.event import EventRecord
from calfeed.models.stats import CalendarStats
from calfeed.models.validation import ValidationReport
from calfeed.summary import build_calendar_stats
from calfeed.timezones import get_zone
from calfeed.validation import validate_calendar

logger = logging.getLogger(__name__)

REFRESH_INTERVAL = timedelta(hours=1)
TIMED_EVENT_DURATION = timedelta(hours=1)
ALL_DAY_DURATION = timedelta(days=1)
USER_PREFIX_LENGTH = 8


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CalendarFeedBuilder:
    """Builds RFC 5545 calendar feeds from event records.

    The builder holds only its config and a clock, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        config: FeedConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize CalendarFeedBuilder.

        Args:
            config: Feed configuration (defaults to FeedConfig())
            clock: Callable returning the current UTC time; tests pass a frozen one
        """
        self.config = config or FeedConfig()
        self.clock = clock or _utc_now
        self.zone = get_zone(self.config.timezone_id)

    def generate_calendar(self, events: Iterable[EventRecord], user_id: str) -> str:
        """Generate a complete calendar document.

        Args:
            events: Event records, emitted in the order given
            user_id: Opaque identifier of the events' owner

        Returns:
            Calendar text with CRLF line endings
        """
        if not user_id:
            raise ValueError("user_id must not be empty")

        now = self.clock()
        events = list(events)

        lines = self._envelope_header(user_id)
        lines.extend(self.zone.to_lines())
        for event in events:
            lines.extend(self._event_lines(event, user_id, now))
        lines.append("END:VCALENDAR")

        logger.debug(f"Generated calendar with {len(events)} event(s) for {user_id[:USER_PREFIX_LENGTH]}")
        return join_lines(lines, fold=self.config.fold_lines)

    def generate_stats(
        self, events: Iterable[EventRecord], today: date | None = None
    ) -> CalendarStats:
        """Compute statistics; ``today`` defaults to the clock's UTC date."""
        if today is None:
            today = self.clock().astimezone(timezone.utc).date()
        return build_calendar_stats(events, today)

    def validate_calendar(self, document: str, strict: bool = False) -> ValidationReport:
        return validate_calendar(document, strict=strict)

    def feed_url(self, user_id: str) -> str:
        """Canonical URL subscribing clients re-fetch."""
        return f"{self.config.publish_url}/api/ical/{user_id}"

    def feed_filename(self, user_id: str) -> str:
        """Download filename, e.g. 'yatwa-calendar-1a2b3c4d.ics'."""
        return f"{self.config.app_slug}-calendar-{user_id[:USER_PREFIX_LENGTH]}.ics"

    def _envelope_header(self, user_id: str) -> list[str]:
        config = self.config
        refresh = format_duration(REFRESH_INTERVAL)
        # The prefix only helps humans tell calendars apart
        calendar_name = f"{config.display_name} - {user_id[:USER_PREFIX_LENGTH]}"
        return [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{config.product_id}",
            "CALSCALE:GREGORIAN",
            "METHOD:PUBLISH",
            f"X-WR-CALNAME:{escape_text(calendar_name)}",
            f"X-WR-CALDESC:{escape_text(config.description)}",
            f"X-WR-TIMEZONE:{config.timezone_id}",
            f"X-PUBLISHED-TTL:{refresh}",
            f"URL:{self.feed_url(user_id)}",
            f"REFRESH-INTERVAL;VALUE=DURATION:{refresh}",
            f"X-WR-RELCALID:{user_id}",
        ]

    def _event_lines(self, event: EventRecord, user_id: str, now: datetime) -> list[str]:
        config = self.config
        lines = [
            "BEGIN:VEVENT",
            f"UID:{event.id}-{user_id}@{config.uid_domain}",
            f"DTSTAMP:{format_utc(now)}",
            f"CREATED:{format_utc(event.created_at)}",
            f"LAST-MODIFIED:{format_utc(event.updated_at)}",
        ]
        lines.extend(self._date_lines(event))

        lines.append(f"SUMMARY:{escape_text(event.title)}")
        if event.description:
            lines.append(f"DESCRIPTION:{escape_text(event.description)}")

        lines.extend(
            [
                f"CATEGORIES:{IconClassifier.category(event.icon).value}",
                f"PRIORITY:{int(IconClassifier.priority(event.icon))}",
                "STATUS:CONFIRMED",
                "TRANSP:OPAQUE",
                "CLASS:PRIVATE",
                # No revision tracking: every fetch is the current state
                "SEQUENCE:0",
                f"URL:{config.publish_url}?hash={user_id}",
                f"{config.vendor_prefix}-ICON:{escape_text(event.icon)}",
                f"{config.vendor_prefix}-ID:{event.id}",
                "END:VEVENT",
            ]
        )
        return lines

    def _date_lines(self, event: EventRecord) -> list[str]:
        if event.event_time is not None:
            # Timed event, local to the configured zone
            start = datetime.combine(event.event_date, event.event_time)
            end = start + TIMED_EVENT_DURATION
            tzid = self.zone.tzid
            return [
                f"DTSTART;TZID={tzid}:{format_local_datetime(start)}",
                f"DTEND;TZID={tzid}:{format_local_datetime(end)}",
            ]

        # All-day event: end date is exclusive
        end_date = event.event_date + ALL_DAY_DURATION
        return [
            f"DTSTART;VALUE=DATE:{format_date(event.event_date)}",
            f"DTEND;VALUE=DATE:{format_date(end_date)}",
        ]
