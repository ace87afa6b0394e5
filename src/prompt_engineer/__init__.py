"""Prompt Engineer Pro: turn short ideas into detailed AI prompts."""

__version__ = "0.1.0"
