"""Error Handlers — every failure leaves the API as a UsuariosError envelope.

Invariants:
    - Raised UsuariosError (the token gate) -> its own status and envelope
    - RequestValidationError (malformed JSON, wrong shape, non-integer id)
      -> InvalidRequestError, 400, never 422
    - Any other exception -> InternalError, 500, no internal details

Design Decisions:
    - Framework errors are translated into the domain hierarchy first, so one
      function (error_response) writes every error body
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from usuarios_api.core.errors import InternalError, InvalidRequestError, UsuariosError

logger = logging.getLogger(__name__)


def error_response(exc: UsuariosError) -> JSONResponse:
    """Envelope for an error variant, shared with the route boundary."""
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def validation_details(errors) -> list[dict[str, str]]:
    """Flatten pydantic error entries to field/message/type triples."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


async def _on_usuarios_error(request: Request, exc: UsuariosError) -> JSONResponse:
    logger.warning(
        f"UsuariosError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return error_response(exc)


async def _on_request_validation(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    error = InvalidRequestError(validation_details(exc.errors()))
    logger.warning(
        f"Invalid request on {request.url.path}: {error.details}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return error_response(error)


async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return error_response(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain, request-shape and catch-all handlers."""
    app.add_exception_handler(UsuariosError, _on_usuarios_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation)
    app.add_exception_handler(Exception, _on_unexpected)
