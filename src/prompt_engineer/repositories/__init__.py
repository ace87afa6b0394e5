"""Repositories for Prompt Engineer Pro."""

from .prompt_repository import PromptRepository

__all__ = ["PromptRepository"]
