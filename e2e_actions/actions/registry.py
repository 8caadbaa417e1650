"""Action registry and decorator."""

from typing import Any, Dict, List, Optional, Type, Union

import structlog

from ..constants import ActionType
from .base import Action


logger = structlog.get_logger(__name__)


class ActionRegistry:
    """Maps action types to the action classes that serve them."""

    def __init__(self) -> None:
        """Initialize the action registry."""
        self._actions: Dict[ActionType, Type[Action]] = {}
        self._descriptions: Dict[ActionType, str] = {}

    def register(
        self,
        action_type: ActionType,
        action_cls: Type[Action],
        description: str = "",
    ) -> None:
        """Register an action class.

        Args:
            action_type: Action type served by the class
            action_cls: Action subclass to instantiate per request
            description: Optional description
        """
        if action_type in self._actions:
            logger.warning(
                "Overriding existing action",
                action=action_type.value,
                previous=self._actions[action_type].__name__,
            )

        self._actions[action_type] = action_cls
        self._descriptions[action_type] = (
            description or f"Action for {action_type.value}"
        )

        logger.info(
            "Registered action",
            action=action_type.value,
            action_class=action_cls.__name__,
        )

    def resolve(self, action_type: Union[ActionType, str, None]) -> Optional[Action]:
        """Create a fresh action for the given type.

        Args:
            action_type: Action type member, its string value or its name

        Returns:
            New action instance, or None when the type is unknown or unmapped
        """
        key = self._lookup_type(action_type)
        if key is None:
            return None

        action_cls = self._actions.get(key)
        if action_cls is None:
            return None

        return action_cls(key, self._descriptions[key])

    @staticmethod
    def _lookup_type(action_type: Union[ActionType, str, None]) -> Optional[ActionType]:
        try:
            return ActionType(action_type)
        except ValueError:
            pass
        if isinstance(action_type, str):
            return ActionType.__members__.get(action_type)
        return None

    def list_actions(self) -> List[Dict[str, str]]:
        """List all registered actions.

        Returns:
            List of action info dictionaries
        """
        return [
            {
                "name": action_type.value,
                "description": self._descriptions[action_type],
            }
            for action_type in self._actions
        ]

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics."""
        return {
            "registered_actions": len(self._actions),
            "action_names": [action_type.value for action_type in self._actions],
        }


# Global action registry instance
_action_registry = ActionRegistry()


def register_action(action_type: ActionType, description: str = "") -> Any:
    """Decorator registering an action class with the global registry.

    Args:
        action_type: Action type served by the decorated class
        description: Optional description

    Returns:
        Decorator function
    """
    def decorator(cls: Type[Action]) -> Type[Action]:
        _action_registry.register(action_type, cls, description)
        return cls

    return decorator


def get_action_registry() -> ActionRegistry:
    """Get the global action registry instance."""
    return _action_registry
