"""Abstract base class for URL shortener storage implementations."""

from abc import ABC, abstractmethod
from typing import List

from .models import ShortURL, Visit


class URLStorageBase(ABC):
    """Abstract base class for URL shortener storage operations."""

    @abstractmethod
    async def create_url(self, short_url: ShortURL) -> ShortURL:
        """Store a new short URL.

        Assigns a unique id and the creation timestamps to ``short_url``.

        Args:
            short_url: Record holding the target URL

        Returns:
            The same record, with id and timestamps set

        Raises:
            GenerationError: If no unique id could be generated
        """
        pass

    @abstractmethod
    async def get_url(self, url_id: str) -> ShortURL:
        """Get the short URL stored under an id.

        Args:
            url_id: The id to lookup

        Returns:
            The stored record

        Raises:
            NotFoundError: If no record exists for ``url_id``
        """
        pass

    @abstractmethod
    async def register_visit(self, url_id: str, visit: Visit) -> Visit:
        """Record a visit to a short URL.

        The caller is responsible for checking that ``url_id`` exists.

        Args:
            url_id: Id of the visited short URL
            visit: Visit details; ``created_at`` is set here

        Returns:
            The recorded visit
        """
        pass

    @abstractmethod
    async def get_visits(self, url_id: str) -> List[Visit]:
        """List every visit recorded for an id, oldest first.

        Args:
            url_id: Id of the short URL

        Returns:
            List of visits (empty if none)
        """
        pass

    @abstractmethod
    async def count_urls(self) -> int:
        """Return the number of stored short URLs."""
        pass

    @abstractmethod
    async def count_visits(self) -> int:
        """Return the number of recorded visits."""
        pass

    async def close(self) -> None:
        """Release storage resources."""
        pass
