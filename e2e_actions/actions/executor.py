"""Dispatches API requests to actions."""

from typing import Any, Optional

import structlog

from ..context.base import Context, ContextProvider
from ..context.host import get_host_environment
from ..context.provider import LauncherContextProvider
from ..errors import ActionFailedError, ContextUnavailableError, UnsupportedActionError
from ..messages import ApiRequest
from .base import ErrorCallback, ResultCallback
from .registry import ActionRegistry, get_action_registry


logger = structlog.get_logger(__name__)


def _ignore_error(error: BaseException) -> None:
    pass


class Executor:
    """Executes actions on behalf of UI surfaces.

    Every call to :meth:`execute` ends in exactly one of the result callback
    or an error callback. Errors never propagate to the caller.
    """

    def __init__(
        self,
        error_callback: Optional[ErrorCallback] = None,
        *,
        registry: Optional[ActionRegistry] = None,
        context_provider: Optional[ContextProvider] = None,
    ) -> None:
        """Initialize the executor.

        Args:
            error_callback: Default error callback for calls that do not
                supply one. Errors are discarded when omitted.
            registry: Action registry, defaults to the global one
            context_provider: Source of the PGP context, defaults to the
                launcher attached to the process host environment
        """
        self.error_callback: ErrorCallback = error_callback or _ignore_error
        self.registry = registry if registry is not None else get_action_registry()
        self.context_provider = (
            context_provider
            if context_provider is not None
            else LauncherContextProvider(get_host_environment())
        )

    def execute(
        self,
        request: ApiRequest,
        requestor: Any,
        callback: ResultCallback,
        error_callback: Optional[ErrorCallback] = None,
    ) -> None:
        """Execute the action named by ``request.action``.

        Args:
            request: The input to the action
            requestor: UI surface through which the action was invoked
            callback: Invoked with the result once the action completes
            error_callback: Invoked on failure; the default error callback is
                used when omitted
        """
        on_error = error_callback or self.error_callback
        action = self.registry.resolve(request.action)

        if action is None:
            logger.warning("Unsupported action requested", action=request.action)
            on_error(UnsupportedActionError(request.action))
            return

        def _on_context(context: Context) -> None:
            logger.debug("Executing action", action=action.name)
            try:
                action.execute(context, request, requestor, callback, on_error)
            except Exception as e:
                logger.error(
                    "Action raised during execution",
                    action=action.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                on_error(ActionFailedError.wrap(e))

        def _on_context_error(cause: BaseException) -> None:
            logger.warning(
                "Context unavailable", action=action.name, error=str(cause)
            )
            on_error(ContextUnavailableError(cause))

        self.context_provider.get_context(_on_context, _on_context_error)
