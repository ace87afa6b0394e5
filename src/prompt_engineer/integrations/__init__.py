"""Clients for the external services Prompt Engineer Pro talks to."""

from .openrouter import OpenRouterClient, build_system_prompt
from .supabase_auth import SupabaseAuthClient

__all__ = ["OpenRouterClient", "SupabaseAuthClient", "build_system_prompt"]
