"""Static VTIMEZONE rule blocks.

Each supported zone is described by a single yearly DAYLIGHT/STANDARD
transition pair instead of a list of historical instants. All zones here follow
the EU rule: summer time starts on the last Sunday of March and ends on the
last Sunday of October, both at 01:00 UTC.

Supporting another zone means adding another static block to ``ZONES``.
"""

from dataclasses import dataclass
from types import MappingProxyType

# EU transitions happen at 01:00 UTC regardless of the zone's offset.
_EU_TRANSITION_UTC_HOUR = 1
_EU_DAYLIGHT_RRULE = "FREQ=YEARLY;BYMONTH=3;BYDAY=-1SU"
_EU_STANDARD_RRULE = "FREQ=YEARLY;BYMONTH=10;BYDAY=-1SU"


@dataclass(frozen=True)
class TransitionRule:
    """One observance (DAYLIGHT or STANDARD) of a timezone."""

    kind: str
    tzname: str
    offset_from: str
    offset_to: str
    dtstart: str
    rrule: str

    def to_lines(self) -> list[str]:
        return [
            f"BEGIN:{self.kind}",
            f"TZOFFSETFROM:{self.offset_from}",
            f"TZOFFSETTO:{self.offset_to}",
            f"TZNAME:{self.tzname}",
            f"DTSTART:{self.dtstart}",
            f"RRULE:{self.rrule}",
            f"END:{self.kind}",
        ]


@dataclass(frozen=True)
class ZoneRules:
    """Rule-based definition of a named timezone."""

    tzid: str
    daylight: TransitionRule
    standard: TransitionRule

    def to_lines(self) -> list[str]:
        """Render the zone as VTIMEZONE content lines."""
        return [
            "BEGIN:VTIMEZONE",
            f"TZID:{self.tzid}",
            *self.daylight.to_lines(),
            *self.standard.to_lines(),
            "END:VTIMEZONE",
        ]


def _format_offset(hours: int) -> str:
    sign = "+" if hours >= 0 else "-"
    return f"{sign}{abs(hours):02d}00"


def _eu_zone(tzid: str, standard_name: str, daylight_name: str, utc_offset: int) -> ZoneRules:
    """Build a zone following the EU last-Sunday-of-March/October rule.

    Args:
        tzid: IANA-style zone identifier used as TZID
        standard_name: Abbreviation in winter (e.g. CET)
        daylight_name: Abbreviation in summer (e.g. CEST)
        utc_offset: Standard offset from UTC in whole hours
    """
    standard_offset = _format_offset(utc_offset)
    daylight_offset = _format_offset(utc_offset + 1)

    # DTSTART is expressed in the local time in effect before the transition
    daylight_start_hour = _EU_TRANSITION_UTC_HOUR + utc_offset
    standard_start_hour = _EU_TRANSITION_UTC_HOUR + utc_offset + 1

    return ZoneRules(
        tzid=tzid,
        daylight=TransitionRule(
            kind="DAYLIGHT",
            tzname=daylight_name,
            offset_from=standard_offset,
            offset_to=daylight_offset,
            dtstart=f"19700329T{daylight_start_hour:02d}0000",
            rrule=_EU_DAYLIGHT_RRULE,
        ),
        standard=TransitionRule(
            kind="STANDARD",
            tzname=standard_name,
            offset_from=daylight_offset,
            offset_to=standard_offset,
            dtstart=f"19701025T{standard_start_hour:02d}0000",
            rrule=_EU_STANDARD_RRULE,
        ),
    )


_CENTRAL_EUROPEAN = (
    "Europe/Berlin",
    "Europe/Amsterdam",
    "Europe/Brussels",
    "Europe/Madrid",
    "Europe/Paris",
    "Europe/Rome",
    "Europe/Vienna",
    "Europe/Zurich",
)

ZONES: MappingProxyType = MappingProxyType(
    {
        **{tzid: _eu_zone(tzid, "CET", "CEST", 1) for tzid in _CENTRAL_EUROPEAN},
        "Europe/London": _eu_zone("Europe/London", "GMT", "BST", 0),
        "Europe/Helsinki": _eu_zone("Europe/Helsinki", "EET", "EEST", 2),
    }
)


def is_supported(tzid: str) -> bool:
    """True if a static rule block exists for ``tzid``."""
    return tzid in ZONES


def get_zone(tzid: str) -> ZoneRules:
    """Get the rule block for a zone.

    Raises:
        KeyError: If no static block exists for the zone
    """
    try:
        return ZONES[tzid]
    except KeyError:
        available = ", ".join(sorted(ZONES))
        raise KeyError(f"No timezone rules for '{tzid}'. Available: {available}") from None
