"""Built-in actions."""

# Import all built-in actions to register them
from . import get_key_description

__all__ = []
