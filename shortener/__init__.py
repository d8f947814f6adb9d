"""Core business logic for URL shortener."""

from .idgen import ShortIDGenerator
from .service import URLShortenerService

__all__ = ["ShortIDGenerator", "URLShortenerService"]
