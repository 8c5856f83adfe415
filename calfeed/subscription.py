"""Subscription URLs and client instructions for a user's feed."""

import re

from pydantic import BaseModel

from calfeed.config import FeedConfig
from calfeed.models.stats import CalendarStats


class FeedUrls(BaseModel):
    """URLs under which a feed can be fetched."""

    ical: str
    webcal: str
    download: str


class CalendarInfo(BaseModel):
    """Everything a UI needs to offer a calendar subscription."""

    user_id: str
    name: str
    description: str
    urls: FeedUrls
    stats: CalendarStats
    instructions: dict[str, str]


class SubscriptionUrlGenerator:
    """Generates subscription URLs for calendar feeds."""

    def __init__(self, config: FeedConfig | None = None):
        self.config = config or FeedConfig()

    def urls(self, user_id: str) -> FeedUrls:
        """
        Generate feed URLs for a user.

        Args:
            user_id: Opaque user identifier, already URL-safe

        Returns:
            FeedUrls with http(s), webcal and download variants
        """
        ical_url = f"{self.config.publish_url}/api/ical/{user_id}"
        # Same content, scheme hints clients to subscribe
        webcal_url = re.sub(r"^https?:", "webcal:", ical_url, flags=re.IGNORECASE)
        return FeedUrls(
            ical=ical_url,
            webcal=webcal_url,
            download=f"{ical_url}?download=1",
        )

    def instructions(self, urls: FeedUrls) -> dict[str, str]:
        """Per-client steps for adding the subscription."""
        return {
            "apple": (
                "Add to iOS/macOS: Settings → Calendar → Accounts → Add Account → "
                f"Other → Add Subscribed Calendar → {urls.webcal}"
            ),
            "google": f"Add to Google Calendar: Settings → Add calendar → From URL → {urls.ical}",
            "outlook": (
                "Add to Outlook: File → Account Settings → Internet Calendars → "
                f"New → {urls.ical}"
            ),
            "thunderbird": (
                "Add to Thunderbird: Events and Tasks → New Calendar → "
                f"On the Network → {urls.ical}"
            ),
        }

    def calendar_info(self, user_id: str, stats: CalendarStats) -> CalendarInfo:
        """Build the subscription summary for a user."""
        urls = self.urls(user_id)
        return CalendarInfo(
            user_id=user_id,
            name=f"{self.config.display_name} - {user_id[:8]}",
            description=self.config.description,
            urls=urls,
            stats=stats,
            instructions=self.instructions(urls),
        )
