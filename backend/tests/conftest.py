"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the usuarios table
    - The app under test is built by create_app() with injected settings and gateway
    - Environment defaults never point at a real database or a real secret
"""

import os

# Ensure module-level app construction never uses real credentials
os.environ.setdefault("JWT_TOKEN", "env-token-not-used-in-tests")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from usuarios_api.config import Settings  # noqa: E402
from usuarios_api.db.base import Base  # noqa: E402
from usuarios_api.infrastructure.database import DatabaseGateway  # noqa: E402
from usuarios_api.main import create_app  # noqa: E402

TEST_TOKEN = "test-secret-token"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def gateway(test_engine):
    return DatabaseGateway(test_engine)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jwt_token=TEST_TOKEN,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
    )


@pytest.fixture
async def client(settings, gateway):
    """FastAPI test client over the in-memory gateway."""
    app = create_app(settings=settings, gateway=gateway)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def valid_payload():
    """A complete creation body (all 8 fields)."""
    return {
        "nombre": "Ana",
        "teléfono": "123",
        "correo": "a@b.com",
        "profesional": "electricista",
        "mensaje": "fix",
        "disponibilidad": "AM",
        "tarifa": "10",
        "ciudad": "X",
    }
