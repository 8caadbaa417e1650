"""Errors delivered to action error callbacks."""

from typing import Any, Dict, Optional


class ActionError(Exception):
    """Base error carrying a message identifier for UI lookup."""

    message_id = "errorActionFailed"

    def __init__(
        self,
        message: str = "",
        *,
        message_id: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description
            message_id: Overrides the class-level message identifier
            cause: Lower-level failure being wrapped
        """
        super().__init__(message or self.message_id)
        if message_id is not None:
            self.message_id = message_id
        self.cause = cause
        self.__cause__ = cause

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the shape consumed by the UI layer.

        The cause is rendered as text for display only; ``self.cause`` keeps
        the exception object.
        """
        data: Dict[str, Any] = {"messageId": self.message_id}
        if self.cause is not None:
            data["cause"] = str(self.cause)
        return data


class UnsupportedActionError(ActionError):
    """No registry entry exists for the requested action type."""

    message_id = "errorUnsupportedAction"

    def __init__(self, action_type: Any) -> None:
        super().__init__(f"Unsupported action: {action_type!r}")
        self.action_type = action_type


class ContextUnavailableError(ActionError):
    """The host environment could not supply a context."""

    message_id = "errorContextUnavailable"

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            f"Context unavailable: {cause}" if cause is not None else "",
            cause=cause,
        )


class ActionFailedError(ActionError):
    """An action raised or reported a failure."""

    message_id = "errorActionFailed"

    @classmethod
    def wrap(cls, error: BaseException) -> ActionError:
        """Wrap an arbitrary exception, passing action errors through as-is."""
        if isinstance(error, ActionError):
            return error
        return cls(f"Action failed: {error}", cause=error)
