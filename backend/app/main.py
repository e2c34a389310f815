"""Storefront API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as the error envelope
    - Middleware order (outermost first): security headers, CORS, access log,
      unhandled-error renderer
    - Store initialized on startup via the lifespan context manager

Design Decisions:
    - create_app() factory with a module-level `app`: uvicorn imports
      app.main:app, tests can build isolated instances
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.middleware import (
    RequestLoggingMiddleware, SecurityHeadersMiddleware, UnhandledErrorMiddleware,
)
from app.api.routes import health, products, users
from app.config import get_settings
from app.infrastructure.memory_store import init_store
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store()
    logger.info(f"Storefront API started ({settings.environment})")
    yield
    logger.info("Storefront API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Storefront API", version=health.API_VERSION, lifespan=lifespan,
    )

    # add_middleware wraps: the last one added runs first
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    base_url = f"http://localhost:{settings.port}"
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Documentation: {base_url}/")
    logger.info(f"Health check: {base_url}/health")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
