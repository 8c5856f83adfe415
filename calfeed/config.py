"""Configuration for calendar feed generation."""

import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from calfeed.exceptions import ConfigurationError
from calfeed.timezones import ZONES, is_supported

try:
    from dotenv import find_dotenv, load_dotenv
except ImportError:
    load_dotenv = None

DEFAULT_APP_NAME = "YATWA"
DEFAULT_PRODUCT_ID = "-//YATWA//Yet Another Trash Web App//EN"
DEFAULT_DESCRIPTION = "Personal calendar from YATWA - Yet Another Trash Web App"
DEFAULT_TIMEZONE = "Europe/Berlin"
DEFAULT_PUBLISH_URL = "http://localhost"
DEFAULT_UID_DOMAIN = "yatwa.app"

_TRUTHY = {"1", "true", "yes", "on"}


class FeedConfig(BaseModel):
    """Feed configuration with Pydantic validation.

    Invalid values fail at construction so a broken config never produces a
    broken document.
    """

    model_config = ConfigDict(frozen=True)

    # Calendar identity
    app_name: str = Field(default=DEFAULT_APP_NAME)
    product_id: str = Field(default=DEFAULT_PRODUCT_ID)
    calendar_name: str | None = None
    description: str = Field(default=DEFAULT_DESCRIPTION)
    timezone_id: str = Field(default=DEFAULT_TIMEZONE)

    # Links
    publish_url: str = Field(default=DEFAULT_PUBLISH_URL)
    uid_domain: str = Field(default=DEFAULT_UID_DOMAIN)

    # Output
    fold_lines: bool = False

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="calfeed.log")

    @field_validator(
        "app_name", "product_id", "description", "timezone_id", "publish_url", "uid_domain"
    )
    @classmethod
    def require_text(cls, v: str, info) -> str:
        """Reject empty or whitespace-only values."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return v.strip()

    @field_validator("calendar_name")
    @classmethod
    def optional_text(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not v.strip():
            raise ValueError("calendar_name must not be empty when set")
        return v.strip()

    @field_validator("publish_url")
    @classmethod
    def validate_publish_url(cls, v: str) -> str:
        if not re.match(r"^https?://", v, re.IGNORECASE):
            raise ValueError(f"publish_url must be an http(s) URL, got '{v}'")
        return v.rstrip("/")

    @field_validator("timezone_id")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if not is_supported(v):
            available = ", ".join(sorted(ZONES))
            raise ValueError(f"Unsupported timezone '{v}'. Available: {available}")
        return v

    @property
    def display_name(self) -> str:
        """Calendar display name, defaulting to '<app_name> Calendar'."""
        return self.calendar_name or f"{self.app_name} Calendar"

    @property
    def vendor_prefix(self) -> str:
        """Prefix for vendor extension properties, e.g. 'X-YATWA'."""
        return "X-" + re.sub(r"[^A-Z0-9]+", "-", self.app_name.upper()).strip("-")

    @property
    def app_slug(self) -> str:
        """App name safe for filenames and headers, e.g. 'my-app-2'."""
        return re.sub(r"[^a-z0-9]+", "-", self.app_name.lower()).strip("-") or "calendar"

    @classmethod
    def from_env(cls) -> "FeedConfig":
        """Load configuration from environment variables and .env file.

        Raises:
            ConfigurationError: If any configured value is invalid
        """
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Calendar identity
        if "CALENDAR_APP_NAME" in os.environ:
            config_dict["app_name"] = os.environ["CALENDAR_APP_NAME"]
        if "CALENDAR_PRODUCT_ID" in os.environ:
            config_dict["product_id"] = os.environ["CALENDAR_PRODUCT_ID"]
        if "CALENDAR_NAME" in os.environ:
            config_dict["calendar_name"] = os.environ["CALENDAR_NAME"]
        if "CALENDAR_DESCRIPTION" in os.environ:
            config_dict["description"] = os.environ["CALENDAR_DESCRIPTION"]
        if "CALENDAR_TIMEZONE" in os.environ:
            config_dict["timezone_id"] = os.environ["CALENDAR_TIMEZONE"]

        # Links
        if "APP_URL" in os.environ:
            config_dict["publish_url"] = os.environ["APP_URL"]
        if "CALENDAR_UID_DOMAIN" in os.environ:
            config_dict["uid_domain"] = os.environ["CALENDAR_UID_DOMAIN"]

        # Output
        if "CALENDAR_FOLD_LINES" in os.environ:
            config_dict["fold_lines"] = (
                os.environ["CALENDAR_FOLD_LINES"].strip().lower() in _TRUTHY
            )

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid feed configuration: {e}") from e
