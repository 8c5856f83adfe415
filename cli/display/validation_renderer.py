"""Renderer for calendar validation reports."""

from rich.markup import escape

from calfeed.models.validation import ValidationReport
from cli.display.console import console

MAX_WARNINGS_SHOWN = 10


class ValidationRenderer:
    """Render validation results with errors first, then warnings."""

    def render_report(self, report: ValidationReport, source: str) -> None:
        """Render a validation report.

        Args:
            report: Report from validate_calendar.
            source: File the report refers to.
        """
        if report.is_valid:
            console.print(f"[green]✓[/green] {source} is valid")
        else:
            console.print(f"[red]✗[/red] {source} is invalid")
            for error in report.errors:
                console.print(f"  [red]error:[/red] {escape(error)}")

        if report.warnings:
            console.print(f"  [yellow]{len(report.warnings)} warning(s)[/yellow]")
            for warning in report.warnings[:MAX_WARNINGS_SHOWN]:
                console.print(f"  [yellow]warning:[/yellow] {warning}")
            hidden = len(report.warnings) - MAX_WARNINGS_SHOWN
            if hidden > 0:
                console.print(f"  [dim]... and {hidden} more[/dim]")
