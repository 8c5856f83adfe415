"""Display module for rendering CLI output.

This module provides renderers for:
- StatsRenderer: Calendar statistics
- ValidationRenderer: Validation reports
- InfoRenderer: Subscription URLs and client instructions

It also provides:
- console: Shared Rich console instance
- Formatting functions for events
"""

from cli.display.console import console
from cli.display.formatters import format_event, format_event_when
from cli.display.info_renderer import InfoRenderer
from cli.display.stats_renderer import StatsRenderer
from cli.display.validation_renderer import ValidationRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "InfoRenderer",
    "StatsRenderer",
    "ValidationRenderer",
    # Formatters
    "format_event",
    "format_event_when",
]
