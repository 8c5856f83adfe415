"""Show subscription URLs and statistics for a user's feed."""

from pathlib import Path

import typer
from rich.markup import escape
from typing_extensions import Annotated

from calfeed.exceptions import IngestionError
from cli.context import get_context
from cli.display import InfoRenderer, console


def info_command(
    events_file: Annotated[
        Path,
        typer.Argument(help="JSON file with event records"),
    ],
    user_id: Annotated[
        str,
        typer.Argument(help="Opaque identifier of the events' owner"),
    ],
) -> None:
    """Show subscription URLs, client instructions and statistics.

    Use 'stats' for statistics only.
    """
    ctx = get_context()

    try:
        events = ctx.reader.read(events_file)
    except IngestionError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    stats_data = ctx.builder.generate_stats(events)
    calendar_info = ctx.url_generator.calendar_info(user_id, stats_data)
    InfoRenderer().render_info(calendar_info)
