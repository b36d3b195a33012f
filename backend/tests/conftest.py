"""
Bookstore API - Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set before any `bookstore` import so the
       settings singleton picks them up. Each test that touches the
       database gets its own in-memory SQLite engine, and the FastAPI
       session dependency is overridden to use it.

Fixture Hierarchy (all function-scoped):
    ├── db_engine: in-memory aiosqlite engine with all tables created
    ├── db_session: AsyncSession on db_engine (repository tests)
    ├── test_client: httpx AsyncClient talking to the app over ASGI
    ├── admin_headers / reader_headers: Authorization headers
    └── mock_repository / service_logger: service unit-test collaborators
"""

import logging
import os
import time
from typing import AsyncGenerator, Dict, Iterable, Optional
from unittest.mock import AsyncMock

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-for-the-bookstore-api-suite"
os.environ["ADMIN_ROLE"] = "Administrator"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from authlib.jose import jwt
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bookstore.config import settings
from bookstore.database import Base, get_db_session
import bookstore.models  # noqa: F401


# ══════════════════════════════════════════════════════════════════════════
# Token helpers
# ══════════════════════════════════════════════════════════════════════════

def make_token(
    subject: str = "tester@bookstore.test",
    roles: Optional[Iterable[str]] = None,
    expires_in: int = 3600,
    secret: Optional[str] = None,
    extra_claims: Optional[Dict] = None,
) -> str:
    """Signs an HS256 JWT the way the identity provider would."""
    now = int(time.time())
    payload = {"sub": subject, "iat": now, "exp": now + expires_in}
    if roles is not None:
        payload["roles"] = list(roles)
    if extra_claims:
        payload.update(extra_claims)
    token = jwt.encode({"alg": "HS256"}, payload, secret or settings.jwt_secret)
    return token.decode("utf-8") if isinstance(token, bytes) else token


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return bearer(make_token(subject="admin@bookstore.test", roles=[settings.admin_role]))


@pytest.fixture
def reader_headers() -> Dict[str, str]:
    return bearer(make_token(subject="reader@bookstore.test", roles=["Customer"]))


# ══════════════════════════════════════════════════════════════════════════
# Database fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A fresh in-memory database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(db_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    The app's get_db_session dependency is replaced with one bound to the
    per-test engine, keeping its commit/rollback behaviour.

    Usage:
        async def test_list(test_client, reader_headers):
            response = await test_client.get("/api/books", headers=reader_headers)
    """
    from bookstore.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Service unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_repository():
    """
    Repository double with every method awaited.

    Defaults describe a store where every write succeeds; tests override
    return values per case.
    """
    repository = AsyncMock()
    repository.find_all = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.exists = AsyncMock(return_value=True)
    repository.create = AsyncMock(return_value=True)
    repository.update = AsyncMock(return_value=True)
    repository.delete = AsyncMock(return_value=True)
    return repository


@pytest.fixture
def service_logger() -> logging.Logger:
    return logging.getLogger("bookstore.tests.service")
