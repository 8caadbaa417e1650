"""Pytest configuration and fixtures for action executor tests."""

import asyncio
from typing import Any, List, Optional

import pytest

from e2e_actions.actions.registry import ActionRegistry
from e2e_actions.actions.builtin.get_key_description import GetKeyDescription
from e2e_actions.config import ExecutorSettings
from e2e_actions.constants import ActionType
from e2e_actions.context import HostEnvironment, LauncherContextProvider
from e2e_actions.context.base import ContextProvider


class FakeContext:
    """Context returning canned key descriptions."""

    def __init__(self, description: str = "Key 0x1234 <alice@example.com>", error: Optional[Exception] = None):
        self.description = description
        self.error = error
        self.calls: List[str] = []

    async def get_key_description(self, content: str) -> str:
        self.calls.append(content)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.description


class FakeLauncher:
    """Launcher handing out a single shared context."""

    def __init__(self, context: Any):
        self.context = context
        self.get_context_calls = 0

    def get_context(self) -> Any:
        self.get_context_calls += 1
        return self.context


class StubContextProvider(ContextProvider):
    """Provider answering synchronously, recording each call."""

    def __init__(self, context: Any = None, error: Optional[BaseException] = None):
        self.context = context
        self.error = error
        self.calls = 0

    def get_context(self, callback, error_callback) -> None:
        self.calls += 1
        if self.error is not None:
            error_callback(self.error)
        else:
            callback(self.context)


class Outcome:
    """Collects callback and error callback invocations."""

    def __init__(self) -> None:
        self.results: List[Any] = []
        self.errors: List[BaseException] = []
        self._done = asyncio.Event()

    def callback(self, result: Any) -> None:
        self.results.append(result)
        self._done.set()

    def error_callback(self, error: BaseException) -> None:
        self.errors.append(error)
        self._done.set()

    @property
    def fired(self) -> int:
        return len(self.results) + len(self.errors)

    async def wait(self, timeout: float = 1.0) -> None:
        await asyncio.wait_for(self._done.wait(), timeout)
        # Let any stray continuation run so double-fires would be visible
        for _ in range(5):
            await asyncio.sleep(0)


@pytest.fixture
def executor_settings():
    """Provide test executor settings."""
    return ExecutorSettings(log_level="DEBUG", log_format="plain")


@pytest.fixture
def fake_context():
    return FakeContext()


@pytest.fixture
def host_environment(fake_context):
    """Provide a host environment with an attached launcher."""
    host = HostEnvironment()
    host.attach(FakeLauncher(fake_context))
    return host


@pytest.fixture
def launcher_provider(host_environment):
    return LauncherContextProvider(host_environment)


@pytest.fixture
def registry():
    """Provide an isolated registry holding the built-in action."""
    registry = ActionRegistry()
    registry.register(ActionType.GET_KEY_DESCRIPTION, GetKeyDescription, "Describe keys")
    return registry


@pytest.fixture
def outcome():
    return Outcome()
