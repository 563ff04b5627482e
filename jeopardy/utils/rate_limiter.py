import asyncio
import time
from typing import Optional
import logging

class RateLimiter:
    """Spaces out requests to the trivia service by a minimum interval."""

    def __init__(self, requests_per_minute: float):
        if requests_per_minute <= 0:
            raise ValueError("requests_per_minute must be positive")
        self.logger = logging.getLogger(__name__)
        self.min_interval = 60.0 / requests_per_minute
        self.last_request_time: Optional[float] = None
        self.request_count = 0
        self.total_wait = 0.0
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            if self.last_request_time is not None:
                wait = self.min_interval - (time.monotonic() - self.last_request_time)
                if wait > 0:
                    self.logger.debug(f"Rate limiting: sleeping for {wait:.2f} seconds")
                    self.total_wait += wait
                    await asyncio.sleep(wait)

            self.last_request_time = time.monotonic()
            self.request_count += 1

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass
