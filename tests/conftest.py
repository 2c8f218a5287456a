import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.apis.deps import get_db
from app.cores.rate_limiter import limiter
from tests.test_db import override_get_db, init_test_db

# Sobrescribe get_db con la base de datos de prueba
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
async def prepare_db():
    await init_test_db()
    yield


@pytest.fixture(autouse=True)
def disable_rate_limits():
    """Los límites de peticiones no aplican entre pruebas."""
    previous = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = previous


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
