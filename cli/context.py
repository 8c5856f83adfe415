"""Shared CLI context with lazy-initialized dependencies."""

from calfeed.config import FeedConfig
from calfeed.feed_builder import CalendarFeedBuilder
from calfeed.ingestion.json_reader import JSONReader
from calfeed.output.ics_writer import ICSWriter
from calfeed.subscription import SubscriptionUrlGenerator


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        document = ctx.builder.generate_calendar(events, user_id)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: FeedConfig | None = None
        self._builder: CalendarFeedBuilder | None = None
        self._reader: JSONReader | None = None
        self._writer: ICSWriter | None = None
        self._url_generator: SubscriptionUrlGenerator | None = None

    @property
    def config(self) -> FeedConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = FeedConfig.from_env()
        return self._config

    @config.setter
    def config(self, value: FeedConfig) -> None:
        self._config = value
        self._builder = None
        self._url_generator = None

    @property
    def builder(self) -> CalendarFeedBuilder:
        """Get feed builder (lazy-loaded)."""
        if self._builder is None:
            self._builder = CalendarFeedBuilder(self.config)
        return self._builder

    @property
    def reader(self) -> JSONReader:
        if self._reader is None:
            self._reader = JSONReader()
        return self._reader

    @property
    def writer(self) -> ICSWriter:
        if self._writer is None:
            self._writer = ICSWriter()
        return self._writer

    @property
    def url_generator(self) -> SubscriptionUrlGenerator:
        if self._url_generator is None:
            self._url_generator = SubscriptionUrlGenerator(self.config)
        return self._url_generator


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
