"""Shared CLI context with lazy-initialized dependencies."""

from orgcal.config import OrgCalConfig
from orgcal.fetcher import CalendarFetcher
from orgcal.providers.base import CalendarProvider
from orgcal.providers.eventkit import EventKitProvider


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        sections = ctx.make_fetcher().fetch(["Work"], start, end)
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: OrgCalConfig | None = None,
        provider: CalendarProvider | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Preloaded configuration (default: loaded from env)
            provider: Calendar provider (default: EventKit)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config = config
        self._provider = provider
        self._fetcher: CalendarFetcher | None = None

    @property
    def config(self) -> OrgCalConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = OrgCalConfig.from_env()
        return self._config

    @property
    def provider(self) -> CalendarProvider:
        """Get calendar provider (lazy-loaded)."""
        if self._provider is None:
            self._provider = EventKitProvider(access_timeout=self.config.access_timeout)
        return self._provider

    def make_fetcher(self, strict: bool | None = None) -> CalendarFetcher:
        """Get a fetcher for the shared provider.

        Args:
            strict: Override config.strict_calendars for this fetcher
        """
        if strict is None:
            strict = self.config.strict_calendars
        if self._fetcher is None or self._fetcher.strict != strict:
            self._fetcher = CalendarFetcher(self.provider, strict=strict)
        return self._fetcher


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
