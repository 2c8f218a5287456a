import pytest
from sqlalchemy import delete

from app.cores.security import get_password_hash
from app.models import User
from tests.test_db import TestingSessionLocal, auth_headers, create_user


@pytest.fixture
async def registered_user():
    return await create_user("luis@test.com", name="Luis", password_hash=get_password_hash("Password123!!"))


@pytest.mark.asyncio
async def test_login_user(client, registered_user):
    response = await client.post("/api/auth/login/", json={
        "email": "luis@test.com",
        "password": "Password123!!"
    })
    print(response.text)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"]["token_type"] == "bearer"
    assert data["data"]["access_token"]
    assert data["data"]["user"]["name"] == "Luis"

    me = await client.get(
        "/api/auth/me",
        headers={"Authorization": f"Bearer {data['data']['access_token']}"},
    )
    assert me.status_code == 200
    assert me.json()["data"]["id"] == registered_user.id


@pytest.mark.asyncio
async def test_login_user_wrong_password(client, registered_user):
    response = await client.post("/api/auth/login/", json={
        "email": "luis@test.com",
        "password": "Password12!!"
    })

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_user_unknown_email(client, registered_user):
    response = await client.post("/api/auth/login/", json={
        "email": "luis@gmail.com",
        "password": "Password123!!"
    })

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_oauth_account_without_password(client):
    await create_user("oauth@test.com", name="OAuth", password_hash=None)

    response = await client.post("/api/auth/login/", json={
        "email": "oauth@test.com",
        "password": "anything"
    })

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_user_fields_password(client):
    response = await client.post("/api/auth/login/", json={
        "email": "luis@gmail.com"
    })

    assert response.status_code == 422
    data = response.json()
    assert any(error["loc"] == ["body", "password"] for error in data["detail"])


@pytest.mark.asyncio
async def test_me_requires_token(client):
    response = await client.get("/api/auth/me")
    assert response.status_code == 401

    response = await client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401

    response = await client.get("/api/auth/me", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_for_deleted_user(client):
    user = await create_user("ghost@test.com")
    headers = auth_headers(user)

    async with TestingSessionLocal() as session:
        await session.execute(delete(User).where(User.id == user.id))
        await session.commit()

    response = await client.get("/api/auth/me", headers=headers)
    assert response.status_code == 404
