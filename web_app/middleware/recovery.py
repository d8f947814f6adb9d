"""Recovery middleware."""

import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortener.errors import INTERNAL_ERROR_MESSAGE
from ..errors import error_response


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Turn unhandled exceptions into a normalized 500 response.

    The stack trace is logged; the client only sees the generic message.
    """

    def __init__(self, app, logger: logging.Logger = None):
        """Initialize recovery middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        """Run the request, recovering from any unhandled exception."""
        try:
            return await call_next(request)
        except Exception:
            self.logger.exception(
                f"Recovered from unhandled error: {request.method} {request.url.path}"
            )
            return error_response(INTERNAL_ERROR_MESSAGE, 500)
