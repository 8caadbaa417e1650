"""Context providers backed by the host environment."""

from typing import Awaitable, Callable

import structlog

from ..utils.tasks import schedule
from .base import Context, ContextCallback, ContextProvider, ErrorCallback
from .host import HostEnvironment, HostUnavailableError


logger = structlog.get_logger(__name__)


class LauncherContextProvider(ContextProvider):
    """Fetches the context from the launcher attached to a host environment."""

    def __init__(self, host: HostEnvironment) -> None:
        """Initialize the provider.

        Args:
            host: Host environment exposing the launcher
        """
        self.host = host

    async def _resolve(self) -> Context:
        launcher = await self.host.get_launcher()
        if launcher is None:
            raise self.host.last_error or HostUnavailableError(
                "Background launcher is not attached"
            )
        return launcher.get_context()

    def get_context(
        self, callback: ContextCallback, error_callback: ErrorCallback
    ) -> None:
        logger.debug("Resolving context from launcher")
        schedule(self._resolve, callback, error_callback)


class AwaitableContextProvider(ContextProvider):
    """Resolves the context from a coroutine function."""

    def __init__(self, factory: Callable[[], Awaitable[Context]]) -> None:
        self.factory = factory

    def get_context(
        self, callback: ContextCallback, error_callback: ErrorCallback
    ) -> None:
        schedule(self.factory, callback, error_callback)
