"""Database module for Prompt Engineer Pro."""

from .base import Base, get_async_engine, get_async_session
from .models import SavedPrompt

__all__ = [
    "Base",
    "get_async_engine",
    "get_async_session",
    "SavedPrompt",
]
