"""Reader/writer lock for asyncio code."""

import asyncio
from contextlib import asynccontextmanager


class ReadWriteLock:
    """Writer-preferring reader/writer lock.

    Any number of readers may hold the lock together. A writer holds it
    alone, and once a writer is waiting no new readers are admitted.

    Usage:
        async with lock.read():
            ...
        async with lock.write():
            ...
    """

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        return self._readers

    @property
    def writing(self) -> bool:
        """Whether a writer currently holds the lock."""
        return self._writer

    @asynccontextmanager
    async def read(self):
        """Hold the shared side of the lock."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self):
        """Hold the exclusive side of the lock."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
            except BaseException:
                # Readers held back by this writer must be woken up
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()
