"""Validate an existing .ics file."""

from pathlib import Path

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import ValidationRenderer, console


def validate_command(
    ics_file: Annotated[
        Path,
        typer.Argument(help="Calendar file to check"),
    ],
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Also parse the file with icalendar"),
    ] = False,
) -> None:
    """Check a calendar file for structural problems.

    Exits with status 1 if the file has errors. Warnings about long lines do
    not affect the exit status.
    """
    ctx = get_context()

    try:
        # Decode bytes directly so CRLF line endings survive
        document = ics_file.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Failed to read {ics_file}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    report = ctx.builder.validate_calendar(document, strict=strict)
    ValidationRenderer().render_report(report, source=str(ics_file))

    if not report.is_valid:
        raise typer.Exit(1)
