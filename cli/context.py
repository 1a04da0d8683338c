"""Shared CLI context with lazy-initialized dependencies."""

from addtocal.config import AddToCalendarConfig
from addtocal.delivery.local import LocalEnvironment
from addtocal.output.ics_encoder import ICSEncoder


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        payload = ctx.encoder.encode(event)
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
        self._config: AddToCalendarConfig | None = None
        self._encoder: ICSEncoder | None = None

    @property
    def config(self) -> AddToCalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = AddToCalendarConfig.from_env()
        return self._config

    @property
    def encoder(self) -> ICSEncoder:
        """Get ICS encoder (lazy-loaded)."""
        if self._encoder is None:
            self._encoder = ICSEncoder.from_config(self.config)
        return self._encoder

    def environment(self, capabilities=None) -> LocalEnvironment:
        """Create a local delivery environment for one invocation."""
        return LocalEnvironment(self.config.download_dir, capabilities=capabilities)


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
