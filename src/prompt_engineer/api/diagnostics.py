"""Explicit, caller-invoked connectivity checks."""

from fastapi import APIRouter, Depends

from ..database.init import check_database_connection, count_saved_prompts
from ..models.generation import ConnectionCheck
from ..services.generation_service import GenerationService
from .dependencies import get_generation_service

router = APIRouter(prefix="/diagnostics")


@router.get("/llm", response_model=ConnectionCheck)
async def check_llm(service: GenerationService = Depends(get_generation_service)):
    """Probe the model endpoint. The result also becomes the cached API status."""
    return await service.test_connection()


@router.get("/database")
async def check_database():
    connected = await check_database_connection()
    return {
        "connected": connected,
        "prompt_count": await count_saved_prompts() if connected else None,
    }
