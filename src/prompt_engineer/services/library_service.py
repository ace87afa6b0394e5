"""Saved prompt library scoped to the signed-in user."""

import logging
from typing import List, Optional

from ..database import SavedPrompt
from ..exceptions import AuthRequiredError, PromptNotFoundError, ValidationError
from ..models.auth import AuthUser
from ..models.library import SavePromptRequest
from ..repositories import PromptRepository

logger = logging.getLogger(__name__)

TITLE_LENGTH = 50


def make_title(original_text: str) -> str:
    """First 50 characters of the idea, with an ellipsis when it was cut."""
    if len(original_text) > TITLE_LENGTH:
        return original_text[:TITLE_LENGTH] + "..."
    return original_text


def _require_user(user: Optional[AuthUser]) -> AuthUser:
    if user is None or not user.id:
        raise AuthRequiredError("You must be logged in to save prompts")
    return user


class LibraryService:
    """Create, list, edit and delete a user's saved prompts."""

    def __init__(self, repository: Optional[PromptRepository] = None):
        self.repository = repository or PromptRepository()

    async def save(self, user: Optional[AuthUser], request: SavePromptRequest) -> SavedPrompt:
        if not request.enhanced_prompt.strip():
            raise ValidationError("No prompt to save")
        user = _require_user(user)

        logger.info(
            f"Saving prompt for user {user.id} "
            f"(input {len(request.original_text)} chars, prompt {len(request.enhanced_prompt)} chars)"
        )
        return await self.repository.create(
            user_id=user.id,
            title=make_title(request.original_text),
            original_text=request.original_text,
            enhanced_prompt=request.enhanced_prompt,
            prompt_type=request.prompt_type,
        )

    async def list_prompts(self, user: Optional[AuthUser], search: Optional[str] = None) -> List[SavedPrompt]:
        user = _require_user(user)
        return await self.repository.list_for_user(user.id, search)

    async def get(self, user: Optional[AuthUser], prompt_id: int) -> SavedPrompt:
        user = _require_user(user)
        prompt = await self.repository.get(user.id, prompt_id)
        if prompt is None:
            raise PromptNotFoundError(prompt_id)
        return prompt

    async def update(self, user: Optional[AuthUser], prompt_id: int, enhanced_prompt: str) -> SavedPrompt:
        """Replace the enhanced text; the original idea and title never change."""
        if not enhanced_prompt.strip():
            raise ValidationError("No changes to save")
        user = _require_user(user)
        prompt = await self.repository.update_enhanced_prompt(user.id, prompt_id, enhanced_prompt)
        if prompt is None:
            raise PromptNotFoundError(prompt_id)
        return prompt

    async def delete(self, user: Optional[AuthUser], prompt_id: int) -> None:
        user = _require_user(user)
        if not await self.repository.delete(user.id, prompt_id):
            raise PromptNotFoundError(prompt_id)
        logger.info(f"Deleted prompt {prompt_id} for user {user.id}")
