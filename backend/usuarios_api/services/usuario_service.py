"""Usuario Service — list, search, create, update and delete handlers.

Invariants:
    - Handlers are stateless: the gateway is the only collaborator
    - Every handler returns an Outcome; DatabaseError never escapes
    - Field validation runs before any storage access (create and update)
    - Update/delete order: validate -> lookup -> write -> rowcount check
    - The write's affected-row count is authoritative: a row that vanished
      between lookup and write yields 404
    - An id outside the column range is not found without touching storage

Design Decisions:
    - Existence lookup is a separate round trip from the write; no
      transaction spans the two
"""

import logging
from collections.abc import Mapping

from usuarios_api.core.domain_types import (
    MSG_CREATED, MSG_DELETED, MSG_UPDATED, USUARIO_ID_MAX, USUARIO_ID_MIN, UsuarioId,
)
from usuarios_api.core.enforce_fields import check_required_fields
from usuarios_api.core.errors import DatabaseError, ResourceNotFoundError
from usuarios_api.core.outcome import Outcome, failure, success
from usuarios_api.db import queries
from usuarios_api.infrastructure.database import DatabaseGateway
from usuarios_api.schemas.usuario import (
    Confirmation, UsuarioCreated, UsuarioRecord, to_public_record,
)

logger = logging.getLogger(__name__)


class UsuarioService:
    """Resource handlers for the usuarios table."""

    def __init__(self, gateway: DatabaseGateway):
        self._gateway = gateway

    async def list_usuarios(self) -> Outcome[list[UsuarioRecord]]:
        try:
            result = await self._gateway.execute(queries.select_all())
        except DatabaseError as e:
            return failure(e)
        return success([to_public_record(row) for row in result.rows])

    async def search_usuarios(
        self, filters: Mapping[str, str | None],
    ) -> Outcome[list[UsuarioRecord]]:
        """Partial, case-insensitive match on the filters that are present."""
        try:
            result = await self._gateway.execute(queries.select_filtered(filters))
        except DatabaseError as e:
            return failure(e)
        return success([to_public_record(row) for row in result.rows])

    async def create_usuario(
        self, fields: Mapping[str, str | None],
    ) -> Outcome[UsuarioCreated]:
        missing = check_required_fields(fields)
        if missing:
            return failure(missing)
        try:
            result = await self._gateway.execute(queries.insert_usuario(fields))
        except DatabaseError as e:
            return failure(e)
        new_id = UsuarioId(int(result.inserted_id))
        logger.info(f"Usuario {new_id} created", extra={"record_id": new_id})
        return success(UsuarioCreated(mensaje=MSG_CREATED, id=new_id), 201)

    async def update_usuario(
        self, record_id: int, fields: Mapping[str, str | None],
    ) -> Outcome[Confirmation]:
        """Full replace of all 8 fields."""
        missing = check_required_fields(fields)
        if missing:
            return failure(missing)
        try:
            if not await self._exists(record_id):
                return failure(ResourceNotFoundError(record_id))
            result = await self._gateway.execute(
                queries.update_usuario(record_id, fields),
            )
        except DatabaseError as e:
            return failure(e)
        if result.rowcount == 0:
            logger.warning(
                f"Usuario {record_id} vanished before update",
                extra={"record_id": record_id},
            )
            return failure(ResourceNotFoundError(record_id))
        logger.info(f"Usuario {record_id} updated", extra={"record_id": record_id})
        return success(Confirmation(mensaje=MSG_UPDATED))

    async def delete_usuario(self, record_id: int) -> Outcome[Confirmation]:
        try:
            if not await self._exists(record_id):
                return failure(ResourceNotFoundError(record_id))
            result = await self._gateway.execute(queries.delete_usuario(record_id))
        except DatabaseError as e:
            return failure(e)
        if result.rowcount == 0:
            logger.warning(
                f"Usuario {record_id} vanished before delete",
                extra={"record_id": record_id},
            )
            return failure(ResourceNotFoundError(record_id))
        logger.info(f"Usuario {record_id} deleted", extra={"record_id": record_id})
        return success(Confirmation(mensaje=MSG_DELETED))

    async def _exists(self, record_id: int) -> bool:
        if not USUARIO_ID_MIN <= record_id <= USUARIO_ID_MAX:
            return False
        result = await self._gateway.execute(queries.select_id(record_id))
        return bool(result.rows)
