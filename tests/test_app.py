import pytest

from app.configs.settings import settings
from app.cores.rate_limiter import limiter


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "ClipStream"}


@pytest.mark.asyncio
async def test_security_headers(client):
    response = await client.get("/api/videos/feed")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Server"] == "ClipStream"
    assert "Cache-Control" not in response.headers

    response = await client.get("/api/auth/me")
    assert response.headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_login_is_rate_limited(client):
    limiter.enabled = True
    limiter.reset()
    allowed = int(settings.AUTH_RATE_LIMIT.split("/")[0])
    body = {"email": "nobody@example.com", "password": "whatever"}

    try:
        for _ in range(allowed):
            response = await client.post("/api/auth/login/", json=body)
            assert response.status_code == 401

        response = await client.post("/api/auth/login/", json=body)
        assert response.status_code == 429
        assert response.json()["success"] is False
    finally:
        limiter.reset()
