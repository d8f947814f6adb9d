"""Middleware for URL shortener web app."""

from .headers import ForwardedHeadersMiddleware
from .logging import LoggingMiddleware
from .recovery import RecoveryMiddleware

__all__ = ["ForwardedHeadersMiddleware", "LoggingMiddleware", "RecoveryMiddleware"]
