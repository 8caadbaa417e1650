"""Interfaces for obtaining the shared PGP context."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Protocol


class Context(Protocol):
    """Shared cryptographic context owned by the host environment."""

    def get_key_description(self, content: str) -> Awaitable[Any]:
        ...


class Launcher(Protocol):
    """Host-side object that owns the context."""

    def get_context(self) -> Context:
        ...


ContextCallback = Callable[[Context], None]
ErrorCallback = Callable[[BaseException], None]


class ContextProvider(ABC):
    """Source of the shared context."""

    @abstractmethod
    def get_context(
        self, callback: ContextCallback, error_callback: ErrorCallback
    ) -> None:
        """Resolve the context asynchronously.

        Exactly one of the continuations fires, once. Resolution cannot be
        cancelled.

        Args:
            callback: Receives the resolved context
            error_callback: Receives the underlying failure
        """
        pass
