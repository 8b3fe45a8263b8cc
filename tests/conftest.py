"""
Shared fixtures for the API test suite.

Provides: in-memory SQLite database, an httpx client bound to the app with the
session dependency overridden, a seeded administrator and bearer headers.
"""

import os

# Must be set before anything_api.api.main is imported.
os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")
os.environ.setdefault("AUTO_SEED", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-characters")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from anything_api.api.main import app
from anything_api.core.settings import AppSettings
from anything_api.db import models  # noqa: F401
from anything_api.db.base import Base
from anything_api.db.seed import ensure_admin_user
from anything_api.db.session import get_async_session

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Admin123!"
ADMIN_NAME = "Administrator"


@pytest_asyncio.fixture
async def session_maker():
    """Fresh in-memory database per test, schema built from the ORM metadata."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    yield maker

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def admin_user(session_maker):
    settings = AppSettings(ADMIN_EMAIL=ADMIN_EMAIL, ADMIN_PASSWORD=ADMIN_PASSWORD, ADMIN_NAME=ADMIN_NAME)
    async with session_maker() as session:
        return await ensure_admin_user(session, settings=settings)


@pytest_asyncio.fixture
async def client(session_maker, admin_user):
    async def _override_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = _override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def login(client: AsyncClient, email: str, password: str) -> dict:
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest_asyncio.fixture
async def admin_tokens(client):
    return await login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def auth_headers(admin_tokens):
    """Bearer headers for the seeded administrator."""
    return {"Authorization": f"Bearer {admin_tokens['accessToken']}"}


@pytest_asyncio.fixture
async def user_headers(client, auth_headers):
    """Bearer headers for a regular user registered through an invite."""
    email = "user@example.com"
    password = "Password1!"
    invite = await client.post("/api/auth/invites", json={"email": email}, headers=auth_headers)
    assert invite.status_code == 200, invite.text
    registered = await client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": "Regular User", "inviteToken": invite.json()["token"]},
    )
    assert registered.status_code == 201, registered.text
    tokens = await login(client, email, password)
    return {"Authorization": f"Bearer {tokens['accessToken']}"}
