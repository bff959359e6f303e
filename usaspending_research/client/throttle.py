"""Minimum spacing between outbound request dispatches."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Optional


class RequestThrottle:
    """Per-client dispatch clock.

    Concurrent callers reserve their dispatch slot under a lock, so each one
    sees the reservation of the caller before it rather than a stale
    timestamp. The sleep itself happens outside the lock, and nothing here is
    held across the network call.
    """

    def __init__(
        self,
        min_interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_dispatch: Optional[float] = None
        self._lock = asyncio.Lock()

    async def wait(self) -> float:
        """Block until this caller may dispatch. Returns the seconds slept."""
        async with self._lock:
            now = self._clock()
            if self._last_dispatch is None:
                slot = now
            else:
                slot = max(now, self._last_dispatch + self.min_interval)
            self._last_dispatch = slot

        delay = slot - now
        if delay > 0:
            await self._sleep(delay)
        return delay
