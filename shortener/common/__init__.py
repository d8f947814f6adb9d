"""Common utilities for URL shortener."""

from .validators import normalize_url
from .headers import extract_forwarded_headers, build_base_url, client_ip
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "normalize_url",
    "extract_forwarded_headers",
    "build_base_url",
    "client_ip",
    "build_short_url",
    "setup_logging",
]
