"""Test configuration and fixtures.

Test setup:
1. Environment is loaded from .env.test before the application is imported
2. Each test gets a fresh in-memory SQLite database with the schema created
3. The request session dependency is overridden with the test session
"""

from collections.abc import AsyncGenerator
from pathlib import Path

from dotenv import load_dotenv

# Load test environment variables before settings are instantiated
test_env_path = Path(__file__).parent.parent / ".env.test"
load_dotenv(test_env_path, override=True)

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.database.base import Base  # noqa: E402
from src.database.dependencies import get_db_session  # noqa: E402
from src.features.rules.models import ValidationRule  # noqa: E402
from src.main import app  # noqa: E402

# Database Setup


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database engine with the full schema.

    StaticPool keeps a single connection so the in-memory database survives
    across sessions within a test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a database session per test."""
    async with AsyncSession(bind=db_engine, expire_on_commit=False) as async_session:
        yield async_session


# FastAPI Client & Dependency Overrides


@pytest_asyncio.fixture(autouse=True)
async def override_get_db_session(session: AsyncSession):
    """Override the database session dependency with the test session."""

    async def _get_test_session():
        yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client.

    ASGITransport does not run the lifespan, so no real database is opened.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Test Rule Factories


@pytest_asyncio.fixture
async def make_rule(session: AsyncSession):
    """Factory fixture to insert rows into the rules store.

    Usage:
        rule = await make_rule("email_format", pattern="^x$")
    """

    async def _factory(rule_name: str, pattern: str = ".*", message: str = "Custom message") -> ValidationRule:
        rule = ValidationRule(rule_name=rule_name, regex_pattern=pattern, error_message=message)
        session.add(rule)
        await session.flush()
        await session.refresh(rule)
        return rule

    yield _factory
