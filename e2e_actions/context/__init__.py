"""Shared context resolution."""

from .base import Context, ContextProvider, Launcher
from .host import HostEnvironment, HostUnavailableError, get_host_environment
from .provider import AwaitableContextProvider, LauncherContextProvider

__all__ = [
    "Context",
    "ContextProvider",
    "Launcher",
    "HostEnvironment",
    "HostUnavailableError",
    "get_host_environment",
    "AwaitableContextProvider",
    "LauncherContextProvider",
]
