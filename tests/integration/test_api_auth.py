"""Bearer token authentication tests."""

from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from src.pitchdesk.core.config import get_settings
from src.pitchdesk.core.security import create_access_token
from tests.factories import UserFactory

pytestmark = pytest.mark.integration

ORGS_URL = "/api/v1/organizations"


async def test_missing_header(client: AsyncClient):
    response = await client.get(ORGS_URL)

    assert response.status_code == 401
    assert response.json()["detail"] == "Missing or invalid authorization header"


async def test_non_bearer_scheme(client: AsyncClient):
    response = await client.get(ORGS_URL, headers={"Authorization": "Basic abc"})

    assert response.status_code == 401


async def test_garbage_token(client: AsyncClient):
    response = await client.get(ORGS_URL, headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


async def test_expired_token(client: AsyncClient, outsider):
    token = create_access_token(outsider.id, expires_delta=timedelta(seconds=-5))

    response = await client.get(ORGS_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


async def test_wrong_token_type(client: AsyncClient, outsider):
    settings = get_settings()
    token = jwt.encode(
        {"sub": str(outsider.id), "type": "refresh"},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )

    response = await client.get(ORGS_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token type"


async def test_unknown_user(client: AsyncClient, engine):
    token = create_access_token(uuid4())

    response = await client.get(ORGS_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "User not found or inactive"


async def test_inactive_user(client: AsyncClient, db_session: AsyncSession):
    user = UserFactory.inactive()
    db_session.add(user)
    await db_session.commit()
    token = create_access_token(user.id)

    response = await client.get(ORGS_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
