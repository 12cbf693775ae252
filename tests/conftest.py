"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("RATE_LIMIT_BACKEND", "memory")
os.environ.setdefault("LOG_TO_FILE", "false")
# Tell app lifespan to skip real DB init
os.environ["NOTEKEEP_SKIP_LIFESPAN_DB"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.notekeep.core import models  # noqa: E402,F401
from src.notekeep.core.models.base import BaseModel  # noqa: E402
from src.notekeep.database import get_db_session  # noqa: E402
from src.notekeep.main import app  # noqa: E402
from src.notekeep.middleware.rate_limit import RateLimiter, get_rate_limiter  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session bound to the per-test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def rate_limiter():
    """In-process limiter, fresh for every test."""
    return RateLimiter(limit=100, window_seconds=60, backend="memory")


@pytest.fixture
def test_app(test_session, rate_limiter):
    """FastAPI app with the database session and rate limiter overridden."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Async test client talking to the app in-process."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def alice_data():
    return {"name": "Alice", "email": "alice@example.com", "pass": "Abcd123!"}


@pytest.fixture
def bob_data():
    return {"name": "Bob", "email": "bob@example.com", "pass": "Wxyz789$"}


async def register_and_login(client: AsyncClient, user_data: dict) -> dict:
    """Register a user through the API and return bearer headers."""
    resp = await client.post("/users/register", json=user_data)
    assert resp.status_code == 200, resp.text

    resp = await client.post(
        "/users/login", json={"email": user_data["email"], "pass": user_data["pass"]}
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
async def alice_headers(client, alice_data):
    return await register_and_login(client, alice_data)


@pytest.fixture
async def bob_headers(client, bob_data):
    return await register_and_login(client, bob_data)
