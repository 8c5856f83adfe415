"""Stats renderer for calendar statistics display."""

from calfeed.models.stats import CalendarStats
from cli.display.console import console
from cli.display.formatters import format_event


class StatsRenderer:
    """Render calendar statistics."""

    def render_statistics(self, stats_data: CalendarStats, source: str) -> None:
        """Render full statistics display.

        Args:
            stats_data: CalendarStats object with computed stats.
            source: Name of the events file (for header display).
        """
        self._render_header(source)
        self._render_overview(stats_data)
        self._render_events_by_category(stats_data)
        console.print()  # trailing newline

    def _render_header(self, source: str) -> None:
        console.print()
        console.print("━" * 50)
        console.print(f"[bold]  Statistics: {source}[/bold]")
        console.print("━" * 50)

    def _render_overview(self, stats_data: CalendarStats) -> None:
        console.print("\n[bold]Overview:[/bold]")
        console.print(f"  Events: {stats_data.total_events:,}")
        console.print(f"  Upcoming: {stats_data.upcoming_events:,}")
        console.print(f"  Next: {format_event(stats_data.next_event)}")

    def _render_events_by_category(self, stats_data: CalendarStats) -> None:
        """Render events by category section."""
        if not stats_data.events_by_category:
            return

        console.print("\n[bold]Events by Category:[/bold]")
        max_len = max(len(c) for c in stats_data.events_by_category.keys())

        for category, count in sorted(
            stats_data.events_by_category.items(), key=lambda x: (-x[1], x[0])
        ):
            pct = (count / stats_data.total_events) * 100 if stats_data.total_events else 0
            console.print(f"  {category:<{max_len}}  {count:>4}  [dim]({pct:>5.1f}%)[/dim]")
