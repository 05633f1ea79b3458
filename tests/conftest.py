"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault(
    "SUPABASE_JWT_SECRET", "test-supabase-jwt-secret-with-enough-bytes-for-hs256"
)
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("DEBUG", "false")

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import fakeredis.aioredis  # noqa: E402
import jwt  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from langchain_core.language_models import BaseChatModel  # noqa: E402
from langchain_core.messages import AIMessage  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app import models  # noqa: E402, F401
from app.core.config import settings  # noqa: E402
from app.core.database import Base, enable_sqlite_foreign_keys  # noqa: E402
from app.core.rate_limit import limiter  # noqa: E402
from app.models.user import User  # noqa: E402

TEST_EXTERNAL_ID = "5b0c7a1e-8f3d-4c1a-9e2b-3d4f5a6b7c8d"
TEST_EMAIL = "test@test.com"

# --- Test DB (SQLite in-memory) ---

test_engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
enable_sqlite_foreign_keys(test_engine.sync_engine)
test_session_factory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    """Create all tables before each test, drop after."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a test database session."""
    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_user(
    external_id: str = TEST_EXTERNAL_ID,
    email: str = TEST_EMAIL,
    name: str | None = "Tester",
) -> User:
    """Insert a synchronized user row directly and return it."""
    async with test_session_factory() as session:
        user = User(external_id=external_id, email=email, name=name)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


# --- Test Redis (fakeredis) ---


@pytest.fixture
def fake_redis() -> fakeredis.aioredis.FakeRedis:
    """Create a fresh fake Redis client."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


@pytest.fixture(autouse=True)
def patch_redis(
    fake_redis: fakeredis.aioredis.FakeRedis,
) -> Generator[None, None, None]:
    """Patch the global redis_client used by get_redis().

    Uses a private MonkeyPatch so a test calling ``monkeypatch.undo()`` on the
    shared fixture does not also remove the fake Redis client.
    """
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr("app.core.redis.redis_client", fake_redis)
        yield


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Start every test with empty rate-limit counters."""
    limiter.reset()


# --- Token helpers ---


def make_token(
    external_id: str = TEST_EXTERNAL_ID,
    email: str = TEST_EMAIL,
    expires_in: timedelta = timedelta(hours=1),
    audience: str = "authenticated",
    secret: str | None = None,
    user_metadata: dict[str, Any] | None = None,
) -> str:
    """Sign a Supabase-style access token."""
    now = datetime.now(UTC)
    payload = {
        "sub": external_id,
        "email": email,
        "aud": audience,
        "role": "authenticated",
        "iat": now,
        "exp": now + expires_in,
        "user_metadata": user_metadata or {},
    }
    key = secret or settings.auth.jwt_secret.get_secret_value()
    return jwt.encode(payload, key, algorithm=settings.auth.algorithm)


def make_auth_headers(
    external_id: str = TEST_EXTERNAL_ID,
    email: str = TEST_EMAIL,
    user_metadata: dict[str, Any] | None = None,
) -> dict[str, str]:
    """Generate Authorization headers with a valid access token."""
    token = make_token(
        external_id=external_id, email=email, user_metadata=user_metadata
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token_factory():  # type: ignore[no-untyped-def]
    """Expose make_token to tests."""
    return make_token


@pytest.fixture
def auth_headers_for():  # type: ignore[no-untyped-def]
    """Expose make_auth_headers to tests."""
    return make_auth_headers


@pytest.fixture
def user_factory():  # type: ignore[no-untyped-def]
    """Expose create_user to tests."""
    return create_user


# --- App override & client fixtures ---


def _get_app():  # type: ignore[no-untyped-def]
    """Import app lazily and apply overrides."""
    from app.core.database import get_async_session as original_dep
    from app.main import app

    app.dependency_overrides[original_dep] = override_get_async_session
    return app


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client without credentials."""
    application = _get_app()
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    application.dependency_overrides.clear()


@pytest.fixture
async def authed_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with auth headers."""
    application = _get_app()
    headers = make_auth_headers()
    transport = ASGITransport(app=application)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers=headers
    ) as ac:
        yield ac
    application.dependency_overrides.clear()


# --- DB session for tests ---


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a raw async session for repository tests."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def user(db_session: AsyncSession) -> User:
    """A synchronized user owned by the raw test session."""
    user = User(external_id=TEST_EXTERNAL_ID, email=TEST_EMAIL, name="Tester")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


# --- Mock LLM ---


@pytest.fixture
def mock_llm() -> MagicMock:
    """Create a mock LLM for testing."""
    mock = MagicMock(spec=BaseChatModel)
    mock.ainvoke = AsyncMock(return_value=AIMessage(content="Test response"))
    return mock
