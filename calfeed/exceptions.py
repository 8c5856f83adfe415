"""Exception hierarchy for calendar feed operations."""


class CalendarError(Exception):
    """Base exception for calendar feed operations."""

    pass


class ConfigurationError(CalendarError):
    """Feed configuration is missing or malformed."""

    pass


class IngestionError(CalendarError):
    """Error while loading event records."""

    pass


class ExportError(CalendarError):
    """Error while writing a calendar document."""

    pass
