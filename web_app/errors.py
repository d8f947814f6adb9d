"""Exception handlers that normalize every error into {error, code}."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener.errors import ShortenerError


def error_response(message: str, code: int, headers: dict = None) -> JSONResponse:
    """Build the JSON body shared by every error path."""
    return JSONResponse(
        status_code=code,
        content={"error": message, "code": code},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """Register handlers for domain, HTTP and validation errors.

    Args:
        app: FastAPI app
        logger: Logger for masked errors
    """

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        if not exc.expose:
            logger.error(
                f"Masking internal error on {request.method} {request.url.path}: {exc!r}",
                exc_info=exc,
            )
        return error_response(exc.public_message, exc.public_status)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Request validation failed: {exc.errors()}")
        return error_response("invalid request", 400)
