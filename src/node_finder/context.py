"""
Process-wide defaults for the module-level actions.

The finder itself takes its driver and configuration explicitly. This context
only supplies them to callers that do not pass a finder of their own.

Usage:
    from node_finder.context import get_context

    ctx = get_context()
    ctx.driver = SeleniumDriver()
    session = ctx.driver.session_for(webdriver)
    click(session, "#submit")
"""

from dataclasses import dataclass, field
from typing import Optional

from .config.environment import FinderConfig
from .exceptions import NoDriverError
from .finder import Finder

import logging
logger = logging.getLogger(__name__)


@dataclass
class FinderContext:
    """
    Default driver and configuration.

    Attributes:
        driver: Driver used by actions that are not given a finder
        config: Retry settings; read when the finder is built
    """

    driver: Optional[object] = None
    config: FinderConfig = field(default_factory=FinderConfig)
    _finder: Optional[Finder] = field(default=None, repr=False)

    def is_driver_initialized(self) -> bool:
        return self.driver is not None

    def get_finder(self) -> Finder:
        """Return a finder for the current driver, rebuilding it if the driver or config changed."""
        if not self.is_driver_initialized():
            raise NoDriverError("No driver attached. Set get_context().driver first.")
        if self._finder is None or self._finder.driver is not self.driver or self._finder.config is not self.config:
            self._finder = Finder(self.driver, self.config)
        return self._finder


# ============================================================================
# Global Context Management
# ============================================================================

_global_context: Optional[FinderContext] = None


def get_context() -> FinderContext:
    """
    Get or create the global finder context.

    All calls return the same instance until reset_context() is called.
    """
    global _global_context

    if _global_context is None:
        # Lazy: the environment is read on first use, not at import time
        from .config.environment import get_env_config

        _global_context = FinderContext(config=get_env_config())

    return _global_context


def reset_context() -> None:
    """Drop the global context (mainly for tests)."""
    global _global_context
    _global_context = None


__all__ = [
    "FinderContext",
    "get_context",
    "reset_context",
]
