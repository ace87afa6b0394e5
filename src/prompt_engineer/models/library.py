"""Prompt library models."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class SavePromptRequest(BaseModel):
    """Request to store a generated prompt."""

    original_text: str = Field(..., description="The idea the user typed")
    enhanced_prompt: str = Field(..., description="The generated prompt text")
    prompt_type: Optional[str] = Field(None, description="Prompt type used for generation")


class UpdatePromptRequest(BaseModel):
    """Request to replace the enhanced text of a saved prompt."""

    enhanced_prompt: str = Field(..., description="New prompt text")


class SavedPromptOut(BaseModel):
    """A saved prompt as returned by the library endpoints."""

    id: int
    user_id: str
    title: str
    original_text: str
    enhanced_prompt: str
    prompt_type: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class PromptListResponse(BaseModel):
    """Listing of saved prompts, newest first."""

    prompts: List[SavedPromptOut]
    total: int
    search: Optional[str] = None
