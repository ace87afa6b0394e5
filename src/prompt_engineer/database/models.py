"""Database models."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from .base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SavedPrompt(Base):
    """A generated prompt saved to a user's library."""

    __tablename__ = "prompts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    original_text = Column(Text, nullable=False)
    enhanced_prompt = Column(Text, nullable=False)
    prompt_type = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
