"""Prompt generation and Markdown rendering endpoints."""

from fastapi import APIRouter, Depends, HTTPException
import logging

from ..exceptions import ValidationError
from ..models.generation import (
    GenerateRequest,
    GenerationResult,
    RenderRequest,
    RenderResponse,
)
from ..prompting import render_markdown
from ..services.generation_service import GenerationService
from .dependencies import get_generation_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/prompts/generate", response_model=GenerationResult)
async def generate_prompt(
    request: GenerateRequest,
    service: GenerationService = Depends(get_generation_service),
):
    """
    Enhance an idea with the remote model.

    Falls back to the offline templates when the model is unreachable or
    answers with something unusable; ``used_fallback`` and ``notice`` tell
    the caller which path was taken.
    """
    logger.info(f"Generating {request.prompt_type} prompt ({len(request.user_input)} chars)")
    try:
        return await service.generate(request.user_input, request.prompt_type)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/prompts/fallback", response_model=GenerationResult)
async def generate_offline_prompt(
    request: GenerateRequest,
    service: GenerationService = Depends(get_generation_service),
):
    """Enhance an idea with the offline templates only."""
    try:
        return service.fallback(request.user_input, request.prompt_type)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/markdown/render", response_model=RenderResponse)
async def render(request: RenderRequest):
    """Render Markdown into an escaped HTML fragment."""
    return RenderResponse(html=render_markdown(request.markdown))
