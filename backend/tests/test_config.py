"""Settings — tests for URL assembly and environment handling."""

from usuarios_api.config import Settings


def test_url_built_from_db_parts():
    settings = Settings(
        _env_file=None, database_url=None,
        db_host="db.internal", db_port=5433, db_user="svc",
        db_password="p@ss", db_name="listados",
    )
    url = settings.sqlalchemy_url
    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.internal"
    assert url.port == 5433
    assert url.username == "svc"
    assert url.password == "p@ss"
    assert url.database == "listados"


def test_database_url_overrides_parts():
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///x.db")
    assert settings.sqlalchemy_url == "sqlite+aiosqlite:///x.db"


def test_plain_postgres_url_rewritten_for_asyncpg():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@h/d")
    assert settings.database_url == "postgresql+asyncpg://u:p@h/d"


def test_defaults(monkeypatch):
    monkeypatch.delenv("JWT_TOKEN", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DATABASE_POOL_SIZE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.database_pool_size == 10
    assert settings.jwt_token == ""


def test_environment_read(monkeypatch):
    monkeypatch.setenv("JWT_TOKEN", "from-env")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings(_env_file=None)
    assert settings.jwt_token == "from-env"
    assert settings.port == 8080
