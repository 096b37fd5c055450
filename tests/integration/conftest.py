"""Integration test fixtures for database and HTTP client operations.

Tests run against an in-memory SQLite database shared through a StaticPool,
so the app's sessions and the test's session see the same data.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.pitchdesk import models  # noqa: F401 - registers tables on the metadata
from src.pitchdesk.core.db import engine as db_engine
from src.pitchdesk.core.security import create_access_token
from src.pitchdesk.main import create_app
from src.pitchdesk.models import Organization, User
from tests.factories import OrganizationFactory, OrganizationMemberFactory, UserFactory

@pytest.fixture
async def engine(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables, installed as the app engine."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    monkeypatch.setattr(db_engine, "_engine", test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    Tests must call `await session.commit()` to make rows visible to the app.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Build a bearer header for a user."""

    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture
async def organization(db_session: AsyncSession) -> Organization:
    org = OrganizationFactory.build()
    db_session.add(org)
    await db_session.commit()
    return org


@pytest.fixture
async def manager(db_session: AsyncSession, organization: Organization) -> User:
    """A user holding the MANAGER role in `organization`."""
    user = UserFactory.build(name="Morgan Manager")
    db_session.add(user)
    await db_session.flush()
    db_session.add(
        OrganizationMemberFactory.manager(organization_id=organization.id, user_id=user.id)
    )
    await db_session.commit()
    return user


@pytest.fixture
async def songwriter(db_session: AsyncSession, organization: Organization) -> User:
    """A user holding the SONGWRITER role in `organization`."""
    user = UserFactory.build(name="Sam Songwriter")
    db_session.add(user)
    await db_session.flush()
    db_session.add(
        OrganizationMemberFactory.songwriter(organization_id=organization.id, user_id=user.id)
    )
    await db_session.commit()
    return user


@pytest.fixture
async def outsider(db_session: AsyncSession) -> User:
    """A user with no membership in `organization`."""
    user = UserFactory.build(name="Olly Outsider")
    db_session.add(user)
    await db_session.commit()
    return user
