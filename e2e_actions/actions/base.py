"""Base class for actions."""

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..constants import ActionType
from ..context.base import Context
from ..messages import ApiRequest


ResultCallback = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]


class Action(ABC):
    """A single-use unit of work bound to one action type.

    A fresh instance is created for every request and discarded once one of
    its continuations has fired.
    """

    def __init__(self, action_type: ActionType, description: str) -> None:
        """Initialize the action.

        Args:
            action_type: Action type this instance serves
            description: Human-readable description
        """
        self.action_type = action_type
        self.description = description

    @property
    def name(self) -> str:
        return self.action_type.value

    @abstractmethod
    def execute(
        self,
        context: Context,
        request: ApiRequest,
        requestor: Any,
        callback: ResultCallback,
        error_callback: ErrorCallback,
    ) -> None:
        """Execute the action.

        Must eventually invoke exactly one of ``callback`` or
        ``error_callback``. Exceptions raised before this method returns are
        routed to ``error_callback`` by the executor; failures in work the
        action schedules must be routed to ``error_callback`` by the action.

        Args:
            context: Shared PGP context
            request: The request being served
            requestor: UI surface that issued the request, passed through as-is
            callback: Receives the result
            error_callback: Receives an ``ActionError``
        """
        pass
