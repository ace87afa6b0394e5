"""Offline prompt generation and Markdown rendering."""

from .classifier import classify
from .markdown import escape_html, render_markdown
from .types import Classification, PromptType
from .templates import generate_fallback_prompt, render_generic, render_template

__all__ = [
    "Classification",
    "PromptType",
    "classify",
    "escape_html",
    "render_markdown",
    "generate_fallback_prompt",
    "render_generic",
    "render_template",
]
