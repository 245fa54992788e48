"""Order Desk API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OrderDeskError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Order store initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI docs exposed only in development
    - create_app(settings) builds the wiring; the module-level app uses get_settings()
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.staticfiles import StaticFiles

from orderdesk.api.error_handlers import register_error_handlers
from orderdesk.api.routes import health, orders
from orderdesk.config import Settings, get_settings
from orderdesk.infrastructure.observability import setup_logging
from orderdesk.infrastructure.order_store import init_order_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_order_store()
    logger.info(f"{settings.app_name} started ({settings.environment})")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI app from settings."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings

    if settings.force_https:
        app.add_middleware(HTTPSRedirectMiddleware)

    # CORS: only the configured frontend origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(orders.router)

    # Frontend: mounted AFTER API routes so /orders and /health take precedence
    # html=True serves index.html at /
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True), name="static",
        )
    return app


app = create_app(get_settings())
