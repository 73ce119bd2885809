"""Error Handlers — framework and unexpected failures map onto the error envelope.

Tests cover:
    - an unexpected exception answers 500 INTERNAL_ERROR without its message
    - a raised UsuariosError answers with its own status
"""

from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from usuarios_api.core.errors import ResourceNotFoundError
from usuarios_api.main import create_app


async def _client_with_failing_routes(settings, gateway) -> AsyncClient:
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    @router.get("/missing")
    async def missing():
        raise ResourceNotFoundError(9)

    app = create_app(settings=settings, gateway=gateway)
    app.include_router(router)
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


async def test_unexpected_exception_is_generic_500(settings, gateway):
    async with await _client_with_failing_routes(settings, gateway) as c:
        res = await c.get("/boom")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


async def test_raised_domain_error_keeps_its_status(settings, gateway):
    async with await _client_with_failing_routes(settings, gateway) as c:
        res = await c.get("/missing")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["record_id"] == 9
