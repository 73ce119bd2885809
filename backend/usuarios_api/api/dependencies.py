"""API Dependencies — settings, gateway, service, the bearer-token gate and the body reader.

Invariants:
    - Settings and gateway are read from app.state (set by create_app), never
      from module globals
    - require_token is a router-level dependency, so it is solved before any
      endpoint dependency or path parameter
    - Gated routes declare no Body() parameter: FastAPI would decode it before
      any dependency runs. read_usuario_payload reads it after the gate instead
    - The presented credential is never logged
"""

import json
import logging

from fastapi import Depends, Request, Security
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from usuarios_api.config import Settings
from usuarios_api.core.enforce_token import check_bearer_token
from usuarios_api.infrastructure.database import DatabaseGateway
from usuarios_api.schemas.usuario import UsuarioPayload
from usuarios_api.services.usuario_service import UsuarioService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Shared secret configured in JWT_TOKEN",
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> DatabaseGateway:
    gateway = request.app.state.gateway
    if gateway is None:
        raise RuntimeError("Database gateway not initialized")
    return gateway


def get_usuario_service(
    gateway: DatabaseGateway = Depends(get_gateway),
) -> UsuarioService:
    return UsuarioService(gateway)


async def require_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> None:
    """Admit the request or raise AuthError (403)."""
    if credentials is None:
        error = check_bearer_token(None, None, settings.jwt_token)
    else:
        error = check_bearer_token(
            credentials.scheme, credentials.credentials, settings.jwt_token,
        )
    if error:
        logger.warning(
            "Rejected request: invalid or missing token",
            extra={"path": request.url.path, "method": request.method},
        )
        raise error


async def read_usuario_payload(request: Request) -> UsuarioPayload:
    """Decode the JSON body; an empty or null body means every field is missing."""
    raw = await request.body()
    if not raw.strip():
        return UsuarioPayload()
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body",),
            "msg": "JSON decode error",
            "input": {},
        }]) from e
    if data is None:
        return UsuarioPayload()
    try:
        return UsuarioPayload.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": ("body", *err["loc"])}
            for err in e.errors(include_url=False)
        ]) from e
