"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Feed text and URLs are printed verbatim, so no automatic highlighting
console = Console(highlight=False)
