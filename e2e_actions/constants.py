"""Constants shared across the action subsystem."""

from enum import Enum


class ActionType(str, Enum):
    """Action types understood by the executor.

    Every member needs a matching entry in the action registry.
    """

    GET_KEY_DESCRIPTION = "get_key_description"
