"""Icon tag classification into calendar categories and priorities."""

from enum import Enum, IntEnum
from types import MappingProxyType


class EventCategory(str, Enum):
    """CATEGORIES values emitted for events."""

    BUSINESS = "BUSINESS"
    MEETING = "MEETING"
    PERSONAL = "PERSONAL"
    VACATION = "VACATION"
    EDUCATION = "EDUCATION"
    APPOINTMENT = "APPOINTMENT"


class EventPriority(IntEnum):
    """PRIORITY values (RFC 5545: 1 highest, 9 lowest)."""

    HIGH = 1
    NORMAL = 5
    LOW = 9


DEFAULT_CATEGORY = EventCategory.PERSONAL
DEFAULT_PRIORITY = EventPriority.NORMAL

ICON_CATEGORIES: MappingProxyType = MappingProxyType(
    {
        "work": EventCategory.BUSINESS,
        "meeting": EventCategory.MEETING,
        "birthday": EventCategory.PERSONAL,
        "anniversary": EventCategory.PERSONAL,
        "personal": EventCategory.PERSONAL,
        "family": EventCategory.PERSONAL,
        "friends": EventCategory.PERSONAL,
        "health": EventCategory.PERSONAL,
        "travel": EventCategory.VACATION,
        "vacation": EventCategory.VACATION,
        "education": EventCategory.EDUCATION,
        "sports": EventCategory.PERSONAL,
        "entertainment": EventCategory.PERSONAL,
        "shopping": EventCategory.PERSONAL,
        "project": EventCategory.BUSINESS,
        "task": EventCategory.BUSINESS,
        "deadline": EventCategory.BUSINESS,
        "conference": EventCategory.MEETING,
        "appointment": EventCategory.APPOINTMENT,
        "reminder": EventCategory.PERSONAL,
        "important": EventCategory.BUSINESS,
        "party": EventCategory.PERSONAL,
        "event": EventCategory.PERSONAL,
    }
)

HIGH_PRIORITY_ICONS = frozenset({"important", "deadline", "work", "meeting", "appointment"})
LOW_PRIORITY_ICONS = frozenset({"entertainment", "shopping", "party"})

# Every tag the frontend offers
ICON_VOCABULARY = frozenset(ICON_CATEGORIES)


class IconClassifier:
    """Maps icon tags to calendar metadata.

    Both lookups are total: unknown tags fall back to a default and never
    raise.
    """

    @staticmethod
    def category(icon: str | None) -> EventCategory:
        """Category for an icon tag (PERSONAL if unmapped)."""
        return ICON_CATEGORIES.get(icon, DEFAULT_CATEGORY)

    @staticmethod
    def priority(icon: str | None) -> EventPriority:
        """Priority for an icon tag (NORMAL if unmapped)."""
        if icon in HIGH_PRIORITY_ICONS:
            return EventPriority.HIGH
        if icon in LOW_PRIORITY_ICONS:
            return EventPriority.LOW
        return DEFAULT_PRIORITY
