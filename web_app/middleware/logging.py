"""Logging middleware."""

import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging.

    Tags each request with an id (the incoming X-Request-ID header if
    present) that is logged and echoed back on the response.
    """

    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.time()

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        client_ip = request.client.host if request.client else "unknown"
        self.logger.info(f"[{request_id}] Request: {request.method} {request.url.path} from {client_ip}")

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000

        self.logger.info(
            f"[{request_id}] Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
