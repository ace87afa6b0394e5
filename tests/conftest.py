"""
Pytest configuration and fixtures.
"""

import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment before the settings object is created
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["OPENROUTER_API_KEY"] = "test-openrouter-key"
os.environ["OPENROUTER_BASE_URL"] = "https://openrouter.test/api/v1"
os.environ["SUPABASE_URL"] = "https://auth.test"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"

from prompt_engineer.database import Base
from prompt_engineer.models.auth import AuthUser
from prompt_engineer.repositories import PromptRepository
from prompt_engineer.services.library_service import LibraryService


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def repository(session_factory) -> PromptRepository:
    return PromptRepository(session_factory=session_factory)


@pytest.fixture
def library_service(repository) -> LibraryService:
    return LibraryService(repository=repository)


@pytest.fixture
def test_user() -> AuthUser:
    return AuthUser(id="test-user-123", email="test@example.com")


@pytest.fixture
def another_user() -> AuthUser:
    """Another user for ownership tests."""
    return AuthUser(id="other-user-456", email="other@example.com")


@pytest.fixture
def app():
    """FastAPI application instance for testing."""
    from prompt_engineer.main import app

    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac
