"""Health Probes — liveness and database connectivity endpoints.

Invariants:
    - GET / always returns 200 plain text if the process is up
    - GET /test-db returns 200 when the probe succeeds, 500 otherwise
    - Neither route is gated
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from usuarios_api.api.dependencies import get_gateway
from usuarios_api.infrastructure.database import DatabaseGateway

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness probe."""
    return "servidor funcionando correctamente"


@router.get(
    "/test-db", response_class=PlainTextResponse,
    responses={500: {"description": "Error al conectar a la base de datos"}},
)
async def test_db(gateway: DatabaseGateway = Depends(get_gateway)):
    """Readiness probe: acquires a pooled connection and runs a trivial query."""
    if not await gateway.probe():
        return PlainTextResponse(
            "Error al conectar a la base de datos",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return "Conexion a la base de datos establecida correctamente"
