"""Configuration management with Pydantic models."""

from .settings import ExecutorSettings

__all__ = ["ExecutorSettings"]
