"""Action dispatch for the end-to-end encryption extension."""

from .actions import Action, ActionRegistry, Executor, get_action_registry, register_action
from .constants import ActionType
from .errors import (
    ActionError,
    ActionFailedError,
    ContextUnavailableError,
    UnsupportedActionError,
)
from .main import create_executor
from .messages import ApiRequest

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionError",
    "ActionFailedError",
    "ActionRegistry",
    "ActionType",
    "ApiRequest",
    "ContextUnavailableError",
    "Executor",
    "UnsupportedActionError",
    "create_executor",
    "get_action_registry",
    "register_action",
]
