"""Data Access Gateway — async connection pool with parameterized execution and a probe.

Invariants:
    - Every statement runs inside one pooled connection, committed on success
    - The connection is released on every exit path (success, error, cancellation)
    - Pool is bounded: pool_size connections, no overflow; extra callers queue
      for at most pool_timeout seconds
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - probe() never raises: failures are logged and reported as False

Design Decisions:
    - Gateway built from an injected engine: the app factory owns construction,
      tests pass an in-memory SQLite engine
    - AsyncConnection over AsyncSession: handlers execute Core statements, no
      identity map needed
"""

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError, TimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.sql.expression import Executable

from usuarios_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)

PROBE_QUERY = "SELECT 1 + 1 AS solution"


@dataclass
class StatementResult:
    """What callers need back from one executed statement."""
    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    inserted_id: int | None = None


class DatabaseGateway:
    """Mediates all relational-store access through pooled connections."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """Provide a pooled connection; commit on success, release always."""
        try:
            async with self.engine.connect() as conn:
                yield conn
                await conn.commit()
        except IntegrityError as e:
            logger.error(f"DB integrity error: {e}", extra={"operation": "commit"})
            raise DatabaseError(
                "restricción de integridad violada", "commit", detail=str(e),
            ) from e
        except TimeoutError as e:
            logger.error(f"DB pool exhausted: {e}", extra={"operation": "acquire"})
            raise DatabaseError(
                "no hay conexiones disponibles", "acquire", detail=str(e),
            ) from e
        except OperationalError as e:
            logger.error(f"DB operational error: {e}", extra={"operation": "execute"})
            raise DatabaseError(
                "error de conexión u operación", "execute", detail=str(e),
            ) from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}", extra={"operation": "query"})
            raise DatabaseError(
                "error del controlador de base de datos", "query", detail=str(e),
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
            raise DatabaseError(
                "la operación de base de datos falló", "unknown", detail=str(e),
            ) from e

    async def execute(
        self, statement: Executable, params: Mapping[str, Any] | None = None,
    ) -> StatementResult:
        """Run one statement with bound parameters and collect its result."""
        async with self.connection() as conn:
            if params:
                result = await conn.execute(statement, dict(params))
            else:
                result = await conn.execute(statement)
            if getattr(statement, "is_insert", False):
                return StatementResult(
                    rowcount=result.rowcount,
                    inserted_id=result.inserted_primary_key[0],
                )
            rows = (
                [dict(row) for row in result.mappings().all()]
                if result.returns_rows else []
            )
            return StatementResult(rows=rows, rowcount=result.rowcount)

    async def probe(self) -> bool:
        """Check database connectivity (for /test-db and startup)."""
        try:
            async with self.connection() as conn:
                result = await conn.execute(text(PROBE_QUERY))
                solution = result.scalar_one()
            logger.info(f"DB probe succeeded (solution={solution})")
            return True
        except Exception as e:
            logger.error(f"DB probe failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_gateway(
    database_url: str | URL, pool_size: int = 10, pool_timeout: float = 30.0,
) -> DatabaseGateway:
    """Build a gateway over a bounded async pool."""
    engine = create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
    return DatabaseGateway(engine)
