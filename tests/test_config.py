"""Tests for configuration."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from calfeed.config import FeedConfig
from calfeed.exceptions import ConfigurationError

ENV_VARS = [
    "CALENDAR_APP_NAME",
    "CALENDAR_PRODUCT_ID",
    "CALENDAR_NAME",
    "CALENDAR_DESCRIPTION",
    "CALENDAR_TIMEZONE",
    "APP_URL",
    "CALENDAR_UID_DOMAIN",
    "CALENDAR_FOLD_LINES",
    "LOG_DIR",
    "LOG_FILENAME",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate os.environ, drop feed variables and run from an empty directory."""
    # .env loading writes to os.environ; keep that inside the test
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_feed_config_defaults():
    """Test FeedConfig default values."""
    config = FeedConfig()
    assert config.product_id == "-//YATWA//Yet Another Trash Web App//EN"
    assert config.display_name == "YATWA Calendar"
    assert config.timezone_id == "Europe/Berlin"
    assert config.publish_url == "http://localhost"
    assert config.uid_domain == "yatwa.app"
    assert config.fold_lines is False
    assert config.log_dir == Path("logs")


def test_display_name_override():
    config = FeedConfig(calendar_name="Family Bins")
    assert config.display_name == "Family Bins"


def test_vendor_prefix():
    assert FeedConfig().vendor_prefix == "X-YATWA"
    assert FeedConfig(app_name="My App 2").vendor_prefix == "X-MY-APP-2"


def test_app_slug():
    assert FeedConfig().app_slug == "yatwa"
    assert FeedConfig(app_name='My "App" 2').app_slug == "my-app-2"
    assert FeedConfig(app_name="***").app_slug == "calendar"


def test_publish_url_trailing_slash_stripped():
    config = FeedConfig(publish_url="https://cal.example.org/")
    assert config.publish_url == "https://cal.example.org"


@pytest.mark.parametrize(
    "field,value",
    [
        ("product_id", ""),
        ("app_name", "   "),
        ("description", ""),
        ("uid_domain", ""),
        ("calendar_name", " "),
        ("publish_url", "ftp://cal.example.org"),
        ("publish_url", "cal.example.org"),
        ("timezone_id", "Mars/Olympus_Mons"),
        ("timezone_id", ""),
    ],
)
def test_invalid_config_fails_fast(field, value):
    """Test that malformed config values are rejected at construction."""
    with pytest.raises(ValidationError, match=field):
        FeedConfig(**{field: value})


def test_config_is_immutable():
    config = FeedConfig()
    with pytest.raises(ValidationError):
        config.timezone_id = "Europe/London"


def test_from_env_defaults(clean_env):
    assert FeedConfig.from_env() == FeedConfig()


def test_from_env_all_vars(clean_env):
    """Test loading config values from environment."""
    clean_env.setenv("CALENDAR_APP_NAME", "Bins")
    clean_env.setenv("CALENDAR_NAME", "Street Collection")
    clean_env.setenv("CALENDAR_TIMEZONE", "Europe/Vienna")
    clean_env.setenv("APP_URL", "https://bins.example.org/")
    clean_env.setenv("CALENDAR_UID_DOMAIN", "bins.example.org")
    clean_env.setenv("CALENDAR_FOLD_LINES", "true")
    clean_env.setenv("LOG_DIR", "/tmp/calfeed-logs")

    config = FeedConfig.from_env()

    assert config.app_name == "Bins"
    assert config.display_name == "Street Collection"
    assert config.timezone_id == "Europe/Vienna"
    assert config.publish_url == "https://bins.example.org"
    assert config.uid_domain == "bins.example.org"
    assert config.fold_lines is True
    assert config.log_dir == Path("/tmp/calfeed-logs")


def test_from_env_fold_lines_false(clean_env):
    clean_env.setenv("CALENDAR_FOLD_LINES", "no")
    assert FeedConfig.from_env().fold_lines is False


def test_from_env_file(clean_env, tmp_path):
    """Test loading config from .env file."""
    (tmp_path / ".env").write_text("APP_URL=https://dotenv.example.org\n")

    config = FeedConfig.from_env()

    assert config.publish_url == "https://dotenv.example.org"


def test_from_env_invalid_raises_configuration_error(clean_env):
    clean_env.setenv("CALENDAR_TIMEZONE", "Atlantis/Capital")

    with pytest.raises(ConfigurationError, match="Atlantis/Capital"):
        FeedConfig.from_env()
