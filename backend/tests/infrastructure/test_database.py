"""Data Access Gateway — execution, error mapping, probe and connection release.

Tests cover:
    - insert returns the generated id; select returns rows keyed by column
    - bound parameters are never interpreted as SQL
    - SQL failures surface as DatabaseError
    - probe() is True on a live store and False (not raising) on a dead one
    - connections are released after failures (pool of 1 keeps working)
    - callers beyond pool capacity wait, then fail with an acquire error
"""

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from usuarios_api.core.errors import DatabaseError
from usuarios_api.db import queries
from usuarios_api.db.base import Base
from usuarios_api.infrastructure.database import DatabaseGateway, create_gateway


def _fields(**overrides) -> dict:
    base = {
        "nombre": "Ana", "teléfono": "123", "correo": "a@b.com",
        "profesional": "electricista", "mensaje": "fix",
        "disponibilidad": "AM", "tarifa": "10", "ciudad": "X",
    }
    base.update(overrides)
    return base


@pytest.fixture
async def single_connection_gateway(tmp_path):
    """File-backed gateway from the app factory, pool of exactly one connection."""
    gw = create_gateway(
        f"sqlite+aiosqlite:///{tmp_path / 'pool.db'}", pool_size=1, pool_timeout=0.2,
    )
    async with gw.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield gw
    await gw.dispose()


async def test_insert_returns_generated_id(gateway):
    first = await gateway.execute(queries.insert_usuario(_fields()))
    second = await gateway.execute(queries.insert_usuario(_fields(nombre="Luis")))
    assert isinstance(first.inserted_id, int)
    assert second.inserted_id != first.inserted_id


async def test_select_rows_keyed_by_column_name(gateway):
    await gateway.execute(queries.insert_usuario(_fields()))
    result = await gateway.execute(queries.select_all())
    assert len(result.rows) == 1
    assert result.rows[0]["teléfono"] == "123"
    assert set(result.rows[0]) == {"id", *_fields().keys()}


async def test_parameters_are_bound_not_interpolated(gateway):
    hostile = "x'); DROP TABLE usuarios; --"
    await gateway.execute(queries.insert_usuario(_fields(nombre=hostile)))
    result = await gateway.execute(queries.select_filtered({"nombre": hostile}))
    assert [row["nombre"] for row in result.rows] == [hostile]


async def test_text_statement_with_params(gateway):
    result = await gateway.execute(text("SELECT :value AS echoed"), {"value": "hola"})
    assert result.rows == [{"echoed": "hola"}]


async def test_delete_reports_rowcount(gateway):
    created = await gateway.execute(queries.insert_usuario(_fields()))
    deleted = await gateway.execute(queries.delete_usuario(created.inserted_id))
    again = await gateway.execute(queries.delete_usuario(created.inserted_id))
    assert deleted.rowcount == 1
    assert again.rowcount == 0


async def test_sql_failure_raises_database_error(gateway):
    with pytest.raises(DatabaseError) as exc_info:
        await gateway.execute(text("SELECT * FROM tabla_inexistente"))
    assert exc_info.value.http_status == 500


async def test_not_null_violation_raises_database_error(gateway):
    with pytest.raises(DatabaseError) as exc_info:
        await gateway.execute(
            text("INSERT INTO usuarios (nombre) VALUES (:nombre)"), {"nombre": "Ana"},
        )
    assert exc_info.value.operation == "commit"


async def test_probe_true_on_live_store(gateway):
    assert await gateway.probe() is True


async def test_probe_false_on_unreachable_store(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'no_such_dir' / 'x.db'}",
    )
    try:
        assert await DatabaseGateway(engine).probe() is False
    finally:
        await engine.dispose()


async def test_connection_released_after_failure(single_connection_gateway):
    gw = single_connection_gateway
    with pytest.raises(DatabaseError):
        await gw.execute(text("SELECT * FROM tabla_inexistente"))
    assert gw.engine.sync_engine.pool.checkedout() == 0
    assert await gw.probe() is True


async def test_waiter_beyond_capacity_times_out(single_connection_gateway):
    gw = single_connection_gateway
    with pytest.raises(DatabaseError) as exc_info:
        async with gw.connection():
            await gw.execute(queries.select_all())
    assert exc_info.value.operation == "acquire"
    assert gw.engine.sync_engine.pool.checkedout() == 0


async def test_factory_builds_bounded_pool(single_connection_gateway):
    pool = single_connection_gateway.engine.sync_engine.pool
    assert pool.size() == 1
    assert pool.timeout() == 0.2
