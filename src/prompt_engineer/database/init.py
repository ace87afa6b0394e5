"""Database schema creation and health check."""

import logging
from typing import Optional
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .base import Base, get_async_engine

logger = logging.getLogger(__name__)


async def check_database_connection() -> bool:
    """
    Check if database connection is available.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def count_saved_prompts() -> Optional[int]:
    """Return the number of rows in the prompts table, or None if it is unreachable."""
    try:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT COUNT(*) FROM prompts"))
            return result.scalar()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Could not access prompts table: {e}")
        return None


async def create_tables():
    """
    Create the prompts table if it does not exist yet.
    """
    logger.info("Ensuring prompts table exists")
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
