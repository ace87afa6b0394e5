"""Repository for SavedPrompt operations."""

import logging
from typing import List, Optional
from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from ..database import get_async_session, SavedPrompt
from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    """Substring LIKE pattern with wildcards in ``term`` escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PromptRepository:
    """Repository for managing saved prompts in database.

    Every query is scoped by ``user_id``; rows of other users behave as if
    they did not exist.
    """

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or get_async_session()

    async def create(
        self,
        user_id: str,
        title: str,
        original_text: str,
        enhanced_prompt: str,
        prompt_type: Optional[str] = None,
    ) -> SavedPrompt:
        """Insert a new saved prompt and return it."""
        prompt = SavedPrompt(
            user_id=user_id,
            title=title,
            original_text=original_text,
            enhanced_prompt=enhanced_prompt,
            prompt_type=prompt_type,
        )
        async with self.session_factory() as session:
            try:
                session.add(prompt)
                await session.commit()
                await session.refresh(prompt)
                return prompt
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Error saving prompt for user {user_id}: {e}")
                raise PersistenceError("Database error while saving prompt")

    async def list_for_user(
        self, user_id: str, search: Optional[str] = None
    ) -> List[SavedPrompt]:
        """
        List a user's prompts, newest first.

        Args:
            user_id: Owner of the prompts
            search: Optional case-insensitive term matched against the
                original text, the enhanced text and the prompt type

        Returns:
            Matching SavedPrompt rows
        """
        stmt = select(SavedPrompt).where(SavedPrompt.user_id == user_id)
        if search and search.strip():
            pattern = _like_pattern(search.strip())
            stmt = stmt.where(
                or_(
                    SavedPrompt.original_text.ilike(pattern, escape="\\"),
                    SavedPrompt.enhanced_prompt.ilike(pattern, escape="\\"),
                    func.coalesce(SavedPrompt.prompt_type, "").ilike(pattern, escape="\\"),
                )
            )
        stmt = stmt.order_by(SavedPrompt.created_at.desc(), SavedPrompt.id.desc())

        async with self.session_factory() as session:
            try:
                result = await session.execute(stmt)
                return list(result.scalars().all())
            except SQLAlchemyError as e:
                logger.error(f"Error fetching prompts for user {user_id}: {e}")
                raise PersistenceError("Failed to load your saved prompts")

    async def get(self, user_id: str, prompt_id: int) -> Optional[SavedPrompt]:
        """Find one of the user's prompts by id."""
        async with self.session_factory() as session:
            try:
                return await self._get(session, user_id, prompt_id)
            except SQLAlchemyError as e:
                logger.error(f"Error fetching prompt {prompt_id}: {e}")
                raise PersistenceError("Failed to load prompt")

    async def update_enhanced_prompt(
        self, user_id: str, prompt_id: int, enhanced_prompt: str
    ) -> Optional[SavedPrompt]:
        """Replace the enhanced text of a prompt. Returns None if it does not exist."""
        async with self.session_factory() as session:
            try:
                prompt = await self._get(session, user_id, prompt_id)
                if prompt is None:
                    return None
                prompt.enhanced_prompt = enhanced_prompt
                await session.commit()
                await session.refresh(prompt)
                return prompt
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Error updating prompt {prompt_id}: {e}")
                raise PersistenceError("Failed to update prompt")

    async def delete(self, user_id: str, prompt_id: int) -> bool:
        """Delete a prompt. Returns False if it does not exist."""
        async with self.session_factory() as session:
            try:
                prompt = await self._get(session, user_id, prompt_id)
                if prompt is None:
                    return False
                await session.delete(prompt)
                await session.commit()
                return True
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Error deleting prompt {prompt_id}: {e}")
                raise PersistenceError("Failed to delete prompt")

    @staticmethod
    async def _get(session, user_id: str, prompt_id: int) -> Optional[SavedPrompt]:
        stmt = select(SavedPrompt).where(
            SavedPrompt.id == prompt_id, SavedPrompt.user_id == user_id
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
