"""Saved prompt library endpoints."""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from ..exceptions import PersistenceError, PromptNotFoundError, ValidationError
from ..models.auth import AuthUser
from ..models.library import (
    PromptListResponse,
    SavedPromptOut,
    SavePromptRequest,
    UpdatePromptRequest,
)
from ..services.library_service import LibraryService
from .dependencies import get_current_user, get_library_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/library")


@router.post("/prompts", response_model=SavedPromptOut, status_code=201)
async def save_prompt(
    request: SavePromptRequest,
    user: AuthUser = Depends(get_current_user),
    service: LibraryService = Depends(get_library_service),
):
    """Save a generated prompt to the user's library."""
    try:
        return await service.save(user, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to save: {e}")


@router.get("/prompts", response_model=PromptListResponse)
async def list_prompts(
    search: Optional[str] = None,
    user: AuthUser = Depends(get_current_user),
    service: LibraryService = Depends(get_library_service),
):
    """List the user's prompts, newest first, optionally filtered by ``search``."""
    try:
        prompts = await service.list_prompts(user, search)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PromptListResponse(
        prompts=[SavedPromptOut.model_validate(p) for p in prompts],
        total=len(prompts),
        search=search,
    )


@router.get("/prompts/{prompt_id}", response_model=SavedPromptOut)
async def get_prompt(
    prompt_id: int,
    user: AuthUser = Depends(get_current_user),
    service: LibraryService = Depends(get_library_service),
):
    try:
        return await service.get(user, prompt_id)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/prompts/{prompt_id}", response_model=SavedPromptOut)
async def update_prompt(
    prompt_id: int,
    request: UpdatePromptRequest,
    user: AuthUser = Depends(get_current_user),
    service: LibraryService = Depends(get_library_service),
):
    """Replace the enhanced text of a saved prompt."""
    try:
        return await service.update(user, prompt_id, request.enhanced_prompt)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PromptNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/prompts/{prompt_id}", status_code=204)
async def delete_prompt(
    prompt_id: int,
    user: AuthUser = Depends(get_current_user),
    service: LibraryService = Depends(get_library_service),
):
    try:
        await service.delete(user, prompt_id)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=204)
