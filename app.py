#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: a single uvicorn process serves requests on one asyncio event
loop. State lives in process memory, so the service runs as one process.

Usage:
    python app.py [--dev-log] [--host HOST] [--port PORT] [--log-level LEVEL]

Environment variables:
    HOST - Host to bind to
    PORT - Port to listen on (default 3000)
    BASE_URL - Base URL for short links when a request carries no host
    DEV_LOG - Set to 1 for human-readable logs instead of JSON
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    SHORT_ID_LENGTH - Length of generated ids (default 4)
    MAX_ID_TRIES - Attempts per id before giving up (default 5)
    SHUTDOWN_TIMEOUT - Seconds to wait for in-flight work on shutdown (default 10)
"""

import argparse
import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.idgen import ShortIDGenerator
from shortener.service import URLShortenerService
from shortener.storage.memory import MemoryStorage
from shortener.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger: logging.Logger) -> URLShortenerService:
    """Wire generator, storage and service from configuration."""
    generator = ShortIDGenerator(length=config.short_id_length)
    storage = MemoryStorage(
        generator=generator,
        max_id_tries=config.max_id_tries,
        logger=logger,
    )
    return URLShortenerService(
        storage=storage,
        logger=logger,
        visit_timeout=config.shutdown_timeout,
    )


def remaining_shutdown_time(app: FastAPI) -> float:
    """Seconds left of the shutdown budget.

    The budget starts when the server receives its exit signal, so time
    spent waiting for open requests counts against the visit drain.
    """
    timeout = app.state.config.shutdown_timeout
    started = getattr(app.state, "shutdown_started", None)
    if started is None:
        return timeout
    return max(0.0, timeout - (time.monotonic() - started))


class ShortenerServer(uvicorn.Server):
    """uvicorn server that records when shutdown was requested."""

    def __init__(self, config: uvicorn.Config, app: FastAPI):
        super().__init__(config)
        self.app = app

    def handle_exit(self, sig, frame):
        if getattr(self.app.state, "shutdown_started", None) is None:
            self.app.state.shutdown_started = time.monotonic()
        super().handle_exit(sig, frame)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    if app.state.service is None:
        app.state.service = build_service(config, logger)

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")

    await app.state.service.close(timeout=remaining_shutdown_time(app))

    logger.info("Service stopped")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="URL shortener service")
    parser.add_argument(
        "--dev-log",
        action="store_true",
        default=None,
        help="Show logs in development format instead of JSON format",
    )
    parser.add_argument("--host", help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument("--log-level", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)

    config = load_config(
        dev_log=args.dev_log,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        dev_mode=config.dev_log,
    )

    if config.dev_log:
        logger.info("Development logging enabled")
    logger.info("Starting URL Shortener service")
    logger.info(f"Configuration: {config.model_dump()}")

    # Service is built in lifespan
    app = create_app(service_instance=None, config=config, logger=logger)
    app.router.lifespan_context = lifespan

    # uvicorn installs SIGINT/SIGTERM handlers: it stops accepting
    # connections and waits up to timeout_graceful_shutdown for requests.
    # Visit draining in lifespan gets whatever is left of the same budget.
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
        timeout_graceful_shutdown=config.shutdown_timeout,
    )

    server = ShortenerServer(uvicorn_config, app)

    try:
        logger.info(f"Listening on http://{config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
