"""In-process stand-in for the extension's background page."""

from typing import Optional

import structlog

from .base import Launcher


logger = structlog.get_logger(__name__)


class HostUnavailableError(Exception):
    """The background launcher is not reachable."""


class HostEnvironment:
    """Exposes the launcher once the background side has started."""

    def __init__(self) -> None:
        self._launcher: Optional[Launcher] = None
        self.last_error: Optional[BaseException] = None

    @property
    def is_attached(self) -> bool:
        return self._launcher is not None

    def attach(self, launcher: Launcher) -> None:
        """Make a launcher available to context providers."""
        if self._launcher is not None:
            logger.warning("Replacing attached launcher")
        self._launcher = launcher
        self.last_error = None
        logger.info("Attached launcher", launcher=type(launcher).__name__)

    def detach(self) -> None:
        self._launcher = None
        logger.info("Detached launcher")

    async def get_launcher(self) -> Optional[Launcher]:
        """Return the attached launcher, or None with ``last_error`` set."""
        if self._launcher is None:
            self.last_error = HostUnavailableError("Background launcher is not attached")
            return None
        return self._launcher


_host_environment = HostEnvironment()


def get_host_environment() -> HostEnvironment:
    """Get the process default host environment."""
    return _host_environment
