"""Adapters turning generated feeds into Flask responses.

Routing stays with the caller; these helpers only shape the response.
"""

import logging
from typing import Iterable

from flask import Response

from calfeed.feed_builder import CalendarFeedBuilder
from calfeed.models.event import EventRecord

logger = logging.getLogger(__name__)

CALENDAR_CONTENT_TYPE = "text/calendar; charset=utf-8"
CACHE_SECONDS = 3600


def calendar_response(document: str, filename: str) -> Response:
    """
    Wrap a calendar document in a downloadable response.

    Args:
        document: Calendar text from CalendarFeedBuilder.generate_calendar
        filename: Attachment filename

    Returns:
        Response with calendar content type and refresh hints
    """
    return Response(
        document,
        status=200,
        content_type=CALENDAR_CONTENT_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": f"public, max-age={CACHE_SECONDS}",
            "X-Published-TTL": "PT1H",
            "Refresh-Interval": str(CACHE_SECONDS),
        },
    )


def feed_response(
    builder: CalendarFeedBuilder, events: Iterable[EventRecord], user_id: str
) -> Response:
    """
    Generate, self-check and serve a user's feed.

    A document failing validation is never served: that means the generator
    itself is broken, so a 500 is returned instead.
    """
    document = builder.generate_calendar(events, user_id)

    report = builder.validate_calendar(document)
    if not report.is_valid:
        logger.error(f"iCal validation failed: {report.errors}")
        return Response(
            "Calendar generation failed", status=500, content_type="text/plain"
        )

    if report.warnings:
        logger.warning(f"iCal warnings: {len(report.warnings)} line(s) over length limit")

    return calendar_response(document, builder.feed_filename(user_id))
