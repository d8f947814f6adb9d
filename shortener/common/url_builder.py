"""URL building utilities for URL shortener."""


def build_short_url(url_id: str, base_url: str) -> str:
    """Build complete short URL.

    Args:
        url_id: The short URL id
        base_url: Base URL (e.g., https://example.com)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{url_id}"
