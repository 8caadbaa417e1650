"""Bridges coroutines onto callback-style continuations."""

import asyncio
from typing import Any, Awaitable, Callable, Set

import structlog


logger = structlog.get_logger(__name__)

# Strong references to in-flight tasks; the event loop only keeps weak ones.
_pending: Set["asyncio.Task[Any]"] = set()


def schedule(
    factory: Callable[[], Awaitable[Any]],
    callback: Callable[[Any], None],
    error_callback: Callable[[BaseException], None],
) -> None:
    """Run a coroutine in the background and report its outcome.

    Exactly one of ``callback`` or ``error_callback`` is invoked, once.

    Args:
        factory: Zero-argument callable returning the awaitable to run
        callback: Receives the awaitable's result
        error_callback: Receives the raised exception
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as e:
        logger.warning("No running event loop to schedule on", error=str(e))
        error_callback(e)
        return

    async def _run() -> Any:
        return await factory()

    task = loop.create_task(_run())
    _pending.add(task)

    def _done(finished: "asyncio.Task[Any]") -> None:
        _pending.discard(finished)
        if finished.cancelled():
            error_callback(asyncio.CancelledError())
            return
        error = finished.exception()
        if error is not None:
            error_callback(error)
        else:
            callback(finished.result())

    task.add_done_callback(_done)


def pending_count() -> int:
    """Number of scheduled tasks that have not completed yet."""
    return len(_pending)
