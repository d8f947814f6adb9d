"""Validation utilities for URL shortener."""

from ..errors import ValidationError


def normalize_url(url: str) -> str:
    """Normalize a submitted URL.

    URLs that do not mention ``http`` anywhere get an ``http://`` prefix, so
    ``example.com`` becomes ``http://example.com``.

    Args:
        url: The submitted URL

    Returns:
        Normalized URL

    Raises:
        ValidationError: If the URL is empty
    """
    if url is None or not isinstance(url, str):
        raise ValidationError("url is required")

    url = url.strip()
    if not url:
        raise ValidationError("url is required")

    if "http" not in url:
        url = "http://" + url
    return url
