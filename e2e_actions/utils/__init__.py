"""Utility functions and helpers."""

from .logging import setup_logging
from .tasks import pending_count, schedule

__all__ = ["setup_logging", "schedule", "pending_count"]
