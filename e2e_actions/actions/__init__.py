"""Action execution subsystem."""

from .base import Action
from .registry import ActionRegistry, get_action_registry, register_action
from .executor import Executor
from . import builtin

__all__ = ["Action", "ActionRegistry", "Executor", "get_action_registry", "register_action"]
