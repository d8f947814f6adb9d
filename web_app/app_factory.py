"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .web import web_router
from .errors import register_exception_handlers
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware
from .middleware.recovery import RecoveryMiddleware


def create_app(
    service_instance,
    config,
    logger: logging.Logger = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance (may be set later via app.state)
        config: Configuration instance
        logger: Logger shared by middleware and error handlers

    Returns:
        Configured FastAPI app
    """
    logger = logger or logging.getLogger("url_shortener")

    app = FastAPI(
        title="URL Shortener",
        description="Minimal in-memory URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger

    register_exception_handlers(app, logger)

    # Last added runs outermost: logging sees the recovered 500
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ForwardedHeadersMiddleware)
    app.add_middleware(RecoveryMiddleware, logger=logger)
    app.add_middleware(LoggingMiddleware, logger=logger)

    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Redirect"])

    return app
