"""Renderer for feed subscription info."""

from rich.table import Table

from calfeed.subscription import CalendarInfo
from cli.display.console import console
from cli.display.formatters import format_event


class InfoRenderer:
    """Render subscription URLs, client instructions and stats."""

    def render_info(self, calendar_info: CalendarInfo) -> None:
        console.print()
        console.print("━" * 60)
        console.print(f"[bold]  Calendar: {calendar_info.name}[/bold]")
        console.print("━" * 60)

        console.print("\n[bold cyan]Feed URLs[/bold cyan]")
        url_table = Table(show_header=False, box=None, padding=(0, 2))
        url_table.add_column("Label", style="dim", width=10)
        url_table.add_column("Value", overflow="fold")
        url_table.add_row("iCal", calendar_info.urls.ical)
        url_table.add_row("Webcal", calendar_info.urls.webcal)
        url_table.add_row("Download", calendar_info.urls.download)
        console.print(url_table)

        stats = calendar_info.stats
        console.print("\n[bold cyan]Events[/bold cyan]")
        console.print(f"  Total: {stats.total_events}  Upcoming: {stats.upcoming_events}")
        console.print(f"  Next: {format_event(stats.next_event)}")

        console.print("\n[bold cyan]Subscribe[/bold cyan]")
        for client, text in calendar_info.instructions.items():
            console.print(f"  [bold]{client}[/bold]: {text}", soft_wrap=True)
        console.print()
