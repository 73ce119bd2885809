"""Usuarios Routes — gated CRUD endpoints for service-provider listings.

Invariants:
    - Every route in this router requires a valid bearer token
    - Routes only translate HTTP <-> service calls; Outcome variants are
      mapped to status codes in _respond()
    - Record ids are path integers; a non-integer id is a 400
    - Write bodies come from read_usuario_payload, which runs after the gate;
      their schema is documented through openapi_extra
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from usuarios_api.api.dependencies import (
    get_usuario_service, read_usuario_payload, require_token,
)
from usuarios_api.api.error_handlers import error_response
from usuarios_api.core.domain_types import SearchFilter
from usuarios_api.core.outcome import Outcome
from usuarios_api.schemas.usuario import (
    Confirmation, UsuarioCreated, UsuarioPayload, UsuarioRecord,
)
from usuarios_api.services.usuario_service import UsuarioService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/users", tags=["usuarios"], dependencies=[Depends(require_token)],
)

_ERROR_RESPONSES = {
    403: {"description": "Token inválido o faltante"},
    500: {"description": "Error del servidor"},
}

_PAYLOAD_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": UsuarioPayload.model_json_schema()},
        },
    },
}


def _respond(outcome: Outcome) -> JSONResponse:
    """Map an Outcome variant to its HTTP response."""
    if not outcome.ok:
        if outcome.error.http_status >= 500:
            logger.error(
                f"Request failed: {outcome.error.message}",
                extra={"error_code": outcome.error.code},
            )
        return error_response(outcome.error)
    return JSONResponse(
        status_code=outcome.http_status,
        content=jsonable_encoder(outcome.value, by_alias=True),
    )


@router.get(
    "", response_model=list[UsuarioRecord], responses=_ERROR_RESPONSES,
    summary="Obtener todos los usuarios",
)
async def list_usuarios(
    service: UsuarioService = Depends(get_usuario_service),
):
    """Lista completa de usuarios registrados (vacía si no hay ninguno)."""
    return _respond(await service.list_usuarios())


@router.get(
    "/search", response_model=list[UsuarioRecord], responses=_ERROR_RESPONSES,
    summary="Buscar usuarios con filtros opcionales",
)
async def search_usuarios(
    nombre: str | None = Query(None, description="Nombre (búsqueda parcial)"),
    correo: str | None = Query(None, description="Correo (búsqueda parcial)"),
    profesional: str | None = Query(None, description="Profesión (búsqueda parcial)"),
    service: UsuarioService = Depends(get_usuario_service),
):
    """Usuarios cuyos campos contienen cada filtro indicado, sin distinguir mayúsculas."""
    filters = {
        SearchFilter.NOMBRE.value: nombre,
        SearchFilter.CORREO.value: correo,
        SearchFilter.PROFESIONAL.value: profesional,
    }
    return _respond(await service.search_usuarios(filters))


@router.post(
    "", response_model=UsuarioCreated, status_code=201,
    responses={400: {"description": "Faltan campos obligatorios"}, **_ERROR_RESPONSES},
    summary="Crear un nuevo usuario",
    openapi_extra=_PAYLOAD_BODY,
)
async def create_usuario(
    payload: UsuarioPayload = Depends(read_usuario_payload),
    service: UsuarioService = Depends(get_usuario_service),
):
    """Crea un usuario; los 8 campos son obligatorios."""
    return _respond(await service.create_usuario(payload.as_fields()))


@router.put(
    "/{usuario_id}", response_model=Confirmation,
    responses={
        400: {"description": "Faltan campos obligatorios"},
        404: {"description": "Usuario no encontrado"},
        **_ERROR_RESPONSES,
    },
    summary="Actualizar un usuario",
    openapi_extra=_PAYLOAD_BODY,
)
async def update_usuario(
    usuario_id: int,
    payload: UsuarioPayload = Depends(read_usuario_payload),
    service: UsuarioService = Depends(get_usuario_service),
):
    """Reemplaza los 8 campos del usuario indicado."""
    return _respond(await service.update_usuario(usuario_id, payload.as_fields()))


@router.delete(
    "/{usuario_id}", response_model=Confirmation,
    responses={404: {"description": "Usuario no encontrado"}, **_ERROR_RESPONSES},
    summary="Eliminar un usuario por ID",
)
async def delete_usuario(
    usuario_id: int,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Elimina el usuario indicado."""
    return _respond(await service.delete_usuario(usuario_id))
