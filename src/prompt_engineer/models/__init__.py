"""Data models for Prompt Engineer Pro."""

from .auth import AuthSession, AuthUser, LoginRequest, RegisterRequest
from .generation import (
    ApiStatus,
    ConnectionCheck,
    GenerateRequest,
    GenerationResult,
    RenderRequest,
    RenderResponse,
)
from .library import (
    PromptListResponse,
    SavedPromptOut,
    SavePromptRequest,
    UpdatePromptRequest,
)

__all__ = [
    "AuthSession",
    "AuthUser",
    "LoginRequest",
    "RegisterRequest",
    "ApiStatus",
    "ConnectionCheck",
    "GenerateRequest",
    "GenerationResult",
    "RenderRequest",
    "RenderResponse",
    "PromptListResponse",
    "SavedPromptOut",
    "SavePromptRequest",
    "UpdatePromptRequest",
]
