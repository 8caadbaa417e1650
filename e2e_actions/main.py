"""Entry point wiring settings, logging and the executor together."""

from typing import Optional

from .actions import Executor
from .actions.base import ErrorCallback
from .config import ExecutorSettings
from .context import ContextProvider
from .utils import setup_logging


def create_executor(
    settings: Optional[ExecutorSettings] = None,
    error_callback: Optional[ErrorCallback] = None,
    context_provider: Optional[ContextProvider] = None,
) -> Executor:
    """Configure logging and build an executor.

    Args:
        settings: Settings to apply, read from the environment when omitted
        error_callback: Default error callback for the executor
        context_provider: Overrides the host environment's launcher

    Returns:
        Ready-to-use executor backed by the global action registry
    """
    settings = settings or ExecutorSettings()
    logger = setup_logging(settings.log_level, settings.log_format)

    executor = Executor(error_callback, context_provider=context_provider)

    logger.info(
        "Created action executor",
        actions=executor.registry.get_stats()["action_names"],
        log_level=settings.log_level,
    )
    return executor
