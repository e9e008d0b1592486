"""
FastAPI application entry point.

This module sets up:
- FastAPI application with middleware
- Exception handlers
- API routes
- The `deskvault` console command (uvicorn on the configured host/port)
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from deskvault.api.routes import accounts, database, health, logs
from deskvault.core.config import settings
from deskvault.core.exceptions import AppException
from deskvault.core.handlers import (
    app_exception_handler,
    general_exception_handler,
    validation_exception_handler,
)
from deskvault.core.lifespan import lifespan
from deskvault.core.logging import setup_logging
from deskvault.middleware import RequestIDMiddleware, RequestLoggingMiddleware

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        Configured application; the database is attached by the lifespan
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description=settings.description,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # ------------------------------------------------------------------------
    # Exception Handlers
    # ------------------------------------------------------------------------
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # ------------------------------------------------------------------------
    # Middleware (last added runs first)
    # ------------------------------------------------------------------------
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ------------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------------
    app.include_router(health.router)
    app.include_router(database.router)
    app.include_router(accounts.router)
    app.include_router(logs.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "deskvault.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the dictConfig from setup_logging()
    )


if __name__ == "__main__":
    run()
