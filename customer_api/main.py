"""Customer API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CustomerApiError → plain-text responses
    - CORS configured from settings (not hardcoded)
    - Schema ensured on startup; engine disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Session manager kept on app.state and reached through dependencies
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customer_api.api.error_handlers import register_error_handlers
from customer_api.api.routes import customers, health
from customer_api.config import Settings, get_settings
from customer_api.infrastructure.database import DatabaseSessionManager
from customer_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url, echo=settings.database_echo,
    )
    await manager.ensure_schema()
    app.state.db_manager = manager
    logger.info(f"{settings.app_name} started on port {settings.port}")
    yield
    logger.info(f"{settings.app_name} shutting down")
    await manager.dispose()
    app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(customers.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
