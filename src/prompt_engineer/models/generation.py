"""Generation-related models."""

from typing import Optional
from pydantic import BaseModel, Field

from ..prompting.types import Classification, PromptType


class GenerateRequest(BaseModel):
    """Request for the prompt generation endpoints."""

    user_input: str = Field(..., description="The idea to turn into a prompt")
    prompt_type: str = Field(
        PromptType.GENERAL.value,
        description="One of general, creative, technical, marketing, educational",
    )


class ConnectionCheck(BaseModel):
    """Outcome of a connectivity probe against the model endpoint."""

    success: bool
    message: str
    status_code: Optional[int] = Field(None, description="HTTP status, if one was received")


class ApiStatus(BaseModel):
    """Last known state of the model endpoint."""

    tested: bool = False
    working: Optional[bool] = None
    message: str = "API status unknown"


class GenerationResult(BaseModel):
    """Response from the prompt generation endpoints."""

    enhanced_prompt: str = Field(..., description="Prompt text as Markdown")
    html: str = Field(..., description="Rendered, escaped HTML fragment")
    prompt_type: str
    used_fallback: bool = False
    classification: Optional[Classification] = Field(
        None, description="Topic detected by the offline generator, if it ran"
    )
    notice: Optional[str] = Field(None, description="Non-blocking message for the user")
    api_status: ApiStatus = Field(default_factory=ApiStatus)


class RenderRequest(BaseModel):
    """Request for the Markdown rendering endpoint."""

    markdown: str = ""


class RenderResponse(BaseModel):
    """Rendered HTML fragment."""

    html: str
