"""Business logic service for URL shortener."""

import asyncio
import logging
from typing import Optional, Dict, Any, Set

from .storage.base import URLStorageBase
from .storage.models import ShortURL, Visit
from .common.validators import normalize_url


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        storage: URLStorageBase,
        logger: Optional[logging.Logger] = None,
        visit_timeout: Optional[float] = None,
    ):
        """Initialize URL shortener service.

        Args:
            storage: Storage instance
            logger: Optional logger
            visit_timeout: Seconds close() waits for pending visits (None waits forever)
        """
        self.storage = storage
        self.logger = logger or logging.getLogger(__name__)
        self.visit_timeout = visit_timeout
        self._visit_tasks: Set[asyncio.Task] = set()

    async def create_short_url(self, url: str) -> ShortURL:
        """Create a new short URL.

        Args:
            url: The URL to shorten; ``http://`` is prefixed when missing

        Returns:
            The stored short URL

        Raises:
            ValidationError: If url is empty
            GenerationError: If no unique id could be generated
        """
        short_url = ShortURL(url=normalize_url(url))
        await self.storage.create_url(short_url)

        self.logger.info(f"Created short URL: {short_url.id} -> {short_url.url}")
        return short_url

    async def get_short_url(self, url_id: str) -> ShortURL:
        """Get the short URL for an id.

        Raises:
            NotFoundError: If the id is unknown
        """
        short_url = await self.storage.get_url(url_id)
        self.logger.debug(f"Retrieved URL: {url_id} -> {short_url.url}")
        return short_url

    def record_visit(
        self,
        url_id: str,
        ip: str = "",
        referer: str = "",
        user_agent: str = "",
    ) -> asyncio.Task:
        """Record a visit in the background (fire and forget).

        Returns as soon as the task is scheduled. Failures are logged and
        never reach the caller. Must be called from a running event loop.

        Args:
            url_id: Id of the visited short URL
            ip: Visitor IP address
            referer: Referer header
            user_agent: User-Agent header

        Returns:
            The scheduled task
        """
        visit = Visit(url_id=url_id, ip=ip, referer=referer, user_agent=user_agent)
        task = asyncio.create_task(self._register_visit(visit))

        # Keep a strong reference until the task finishes
        self._visit_tasks.add(task)
        task.add_done_callback(self._visit_tasks.discard)
        return task

    async def _register_visit(self, visit: Visit) -> None:
        try:
            await self.storage.register_visit(visit.url_id, visit)
            self.logger.debug(f"Registered visit: {visit.to_dict()}")
        except Exception:
            # The redirect has already been served; log and move on
            self.logger.exception(f"Error registering visit for {visit.url_id}")

    @property
    def pending_visits(self) -> int:
        """Number of visit tasks that have not finished yet."""
        return len(self._visit_tasks)

    async def drain(self, timeout: Optional[float] = None) -> bool:
        """Wait for outstanding visit tasks.

        Args:
            timeout: Maximum seconds to wait (None waits forever)

        Returns:
            True if every task finished, False if some were cancelled
        """
        pending = list(self._visit_tasks)
        if not pending:
            return True

        _, not_done = await asyncio.wait(pending, timeout=timeout)
        if not_done:
            self.logger.warning(f"Cancelling {len(not_done)} unfinished visit registrations")
            for task in not_done:
                task.cancel()
            return False
        return True

    async def health_check(self) -> Dict[str, Any]:
        """Perform health check.

        Returns:
            Dictionary with health status and counters
        """
        try:
            urls = await self.storage.count_urls()
            visits = await self.storage.count_visits()
        except Exception:
            self.logger.exception("Storage health check failed")
            return {"storage": False, "urls": 0, "visits": 0}

        return {"storage": True, "urls": urls, "visits": visits}

    async def close(self, timeout: Optional[float] = None) -> None:
        """Drain visit tasks and close storage.

        Args:
            timeout: Seconds to wait for pending visits; defaults to visit_timeout
        """
        await self.drain(self.visit_timeout if timeout is None else timeout)
        await self.storage.close()
