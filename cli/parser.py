"""CLI application and command routing."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from calfeed.exceptions import ConfigurationError
from cli import setup_logging
from cli.commands import generate_command, info_command, stats_command, validate_command
from cli.context import CLIContext, set_context
from cli.display import console

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Generate, inspect and validate iCal feeds from event exports.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info-level log output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared CLI context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    try:
        config = ctx.config
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging(verbose=verbose, quiet=quiet, config=config)
    set_context(ctx)


app.command("generate")(generate_command)
app.command("validate")(validate_command)
app.command("stats")(stats_command)
app.command("info")(info_command)
