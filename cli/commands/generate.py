"""Generate an iCal feed from an event export."""

import logging
from pathlib import Path

import typer
from rich.markup import escape
from typing_extensions import Annotated

from calfeed.exceptions import ExportError, IngestionError
from cli.context import get_context
from cli.display import ValidationRenderer, console

logger = logging.getLogger(__name__)


def generate_command(
    events_file: Annotated[
        Path,
        typer.Argument(help="JSON file with event records"),
    ],
    user_id: Annotated[
        str,
        typer.Argument(help="Opaque identifier of the events' owner"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the feed to this .ics file instead of stdout"),
    ] = None,
    fold: Annotated[
        bool,
        typer.Option("--fold", help="Fold content lines at 75 octets"),
    ] = False,
) -> None:
    """Generate an iCal feed from an event export.

    The generated document is validated before it is written; an invalid
    document is reported and nothing is written.
    """
    ctx = get_context()
    if fold:
        ctx.config = ctx.config.model_copy(update={"fold_lines": True})
    builder = ctx.builder

    try:
        events = ctx.reader.read(events_file)
    except IngestionError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    document = builder.generate_calendar(events, user_id)
    report = builder.validate_calendar(document)
    if not report.is_valid:
        ValidationRenderer().render_report(report, source=str(events_file))
        raise typer.Exit(1)

    if report.warnings:
        logger.warning(f"{len(report.warnings)} line(s) exceed the recommended length")

    if output is None:
        typer.echo(document, nl=False)
        return

    try:
        ctx.writer.write(document, output)
    except ExportError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"Calendar with {len(events)} event(s) written to {output}")
