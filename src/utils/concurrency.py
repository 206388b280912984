"""Reader/writer lock for the in-memory artist snapshot.

asyncio ships ``Lock``, ``Semaphore`` and ``Condition`` but no shared/exclusive
lock, so :class:`ReadWriteLock` builds one on a single ``asyncio.Condition``:

- any number of readers may hold the lock together;
- a writer waits until active readers drain, then holds it alone;
- once a writer is waiting, new readers queue behind it so a steady stream
  of requests cannot starve a snapshot swap.

Usage::

    lock = ReadWriteLock()

    async with lock.read():
        snapshot = self._snapshot

    async with lock.write():
        self._snapshot = candidate
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Shared/exclusive lock for coroutines running on one event loop."""

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        """Number of coroutines currently holding the shared lock."""
        return self._readers

    @property
    def write_locked(self) -> bool:
        return self._writer_active

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock in shared mode for the body of the ``async with``."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
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
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock exclusively for the body of the ``async with``."""
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
            finally:
                self._writers_waiting -= 1
                # Readers parked behind a cancelled writer must re-check.
                self._cond.notify_all()
            self._writer_active = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer_active = False
                self._cond.notify_all()
