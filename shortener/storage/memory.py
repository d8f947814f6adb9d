"""In-memory storage for URL shortener."""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..errors import ExhaustedRetriesError, InternalError, NotFoundError
from ..idgen import MAX_ID_TRIES, ShortIDGenerator
from .base import URLStorageBase
from .locks import ReadWriteLock
from .models import ShortURL, Visit


class MemoryStorage(URLStorageBase):
    """Storage backed by process memory.

    Both maps are guarded by a single reader/writer lock. Nothing is
    persisted and nothing is evicted; visit lists grow without bound.
    """

    def __init__(
        self,
        generator: Optional[ShortIDGenerator] = None,
        max_id_tries: int = MAX_ID_TRIES,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize in-memory storage.

        Args:
            generator: Short id generator
            max_id_tries: Attempts before giving up on a colliding id
            logger: Optional logger
        """
        if max_id_tries < 1:
            raise ValueError("max_id_tries must be at least 1")

        self.generator = generator or ShortIDGenerator()
        self.max_id_tries = max_id_tries
        self.logger = logger or logging.getLogger(__name__)

        self._lock = ReadWriteLock()
        self._urls: Dict[str, ShortURL] = {}
        self._visits: Dict[str, List[Visit]] = defaultdict(list)

    async def create_url(self, short_url: ShortURL) -> ShortURL:
        # Generate and insert under one exclusive hold so concurrent
        # creates cannot pick the same free id.
        async with self._lock.write():
            url_id = self._generate_id()
            now = datetime.now(timezone.utc)
            short_url.id = url_id
            short_url.created_at = now
            short_url.updated_at = now
            self._urls[url_id] = short_url

        return short_url

    async def get_url(self, url_id: str) -> ShortURL:
        async with self._lock.read():
            short_url = self._urls.get(url_id)

        if short_url is None:
            raise NotFoundError()
        return short_url

    async def register_visit(self, url_id: str, visit: Visit) -> Visit:
        if visit.url_id and visit.url_id != url_id:
            raise InternalError(
                f"visit for '{visit.url_id}' registered under '{url_id}'"
            )

        visit.url_id = url_id
        visit.created_at = datetime.now(timezone.utc)
        async with self._lock.write():
            self._visits[url_id].append(visit)

        return visit

    async def get_visits(self, url_id: str) -> List[Visit]:
        async with self._lock.read():
            return list(self._visits.get(url_id, ()))

    async def count_urls(self) -> int:
        async with self._lock.read():
            return len(self._urls)

    async def count_visits(self) -> int:
        async with self._lock.read():
            return sum(len(visits) for visits in self._visits.values())

    def _generate_id(self) -> str:
        """Generate an id not yet in use. Caller must hold the write lock.

        Raises:
            RandomSourceError: If the random source fails
            ExhaustedRetriesError: If every attempt collided
        """
        for attempt in range(self.max_id_tries):
            url_id = self.generator.generate()
            if url_id not in self._urls:
                if attempt:
                    self.logger.debug(f"Generated id after {attempt + 1} attempts: {url_id}")
                return url_id

            self.logger.debug(f"Id collision on attempt {attempt + 1}: {url_id}")

        raise ExhaustedRetriesError(
            f"could not generate URL ID after {self.max_id_tries} attempts"
        )
