"""Usuarios API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsuariosError -> structured JSON responses
    - Settings and gateway live on app.state; create_app() accepts both for injection
    - A gateway built by the lifespan is disposed by the lifespan; an injected
      one belongs to the caller

Design Decisions:
    - Lifespan over @app.on_event
    - Interactive docs served at /api-docs
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usuarios_api.api.error_handlers import register_error_handlers
from usuarios_api.api.routes import health, usuarios
from usuarios_api.config import Settings, get_settings
from usuarios_api.infrastructure.database import DatabaseGateway, create_gateway
from usuarios_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    owns_gateway = app.state.gateway is None
    if owns_gateway:
        app.state.gateway = create_gateway(
            settings.sqlalchemy_url,
            pool_size=settings.database_pool_size,
            pool_timeout=settings.database_pool_timeout,
        )
    if await app.state.gateway.probe():
        logger.info("Usuarios API started, database reachable")
    else:
        logger.warning("Usuarios API started, database unreachable")
    yield
    logger.info("Usuarios API shutting down")
    if owns_gateway:
        await app.state.gateway.dispose()
        app.state.gateway = None


def create_app(
    settings: Settings | None = None, gateway: DatabaseGateway | None = None,
) -> FastAPI:
    """Build the application around the given settings and gateway."""
    settings = settings or get_settings()
    app = FastAPI(
        title="API de Usuarios",
        description="API para manejar usuarios en el sistema",
        version="1.0.0",
        docs_url="/api-docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(usuarios.router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
