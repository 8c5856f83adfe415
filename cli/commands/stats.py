"""Show event counts by category and the next upcoming event."""

from datetime import datetime
from pathlib import Path

import typer
from rich.markup import escape
from typing_extensions import Annotated

from calfeed.exceptions import IngestionError
from cli.context import get_context
from cli.display import StatsRenderer, console


def stats_command(
    events_file: Annotated[
        Path,
        typer.Argument(help="JSON file with event records"),
    ],
    today: Annotated[
        datetime | None,
        typer.Option("--today", formats=["%Y-%m-%d"], help="Reference date (default: today, UTC)"),
    ] = None,
) -> None:
    """Show event counts by category and the next upcoming event."""
    ctx = get_context()

    try:
        events = ctx.reader.read(events_file)
    except IngestionError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    stats_data = ctx.builder.generate_stats(events, today=today.date() if today else None)
    StatsRenderer().render_statistics(stats_data, source=events_file.name)
