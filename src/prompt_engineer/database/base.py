"""Database connection and session management."""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from ..config import settings

# Create base class for models
Base = declarative_base()

# Create async engine
engine = None


def get_async_engine():
    """Get or create async database engine."""
    global engine
    if engine is None:
        url = settings.sqlalchemy_url
        options = {"echo": settings.debug, "pool_pre_ping": True}
        # SQLite pools do not accept size arguments
        if not url.startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20)
        engine = create_async_engine(url, **options)
    return engine


# Create async session factory
async_session = None


def get_async_session():
    """Get async session factory."""
    global async_session
    if async_session is None:
        async_session = async_sessionmaker(
            get_async_engine(), class_=AsyncSession, expire_on_commit=False
        )
    return async_session
