"""
Client for the cluebase trivia API.

Wraps the two read-only endpoints the board builder needs:

- ``GET /categories?limit=N&offset=M``
- ``GET /clues?category=<name>``

Transient failures (connection errors, timeouts, HTTP 5xx) are retried with
exponential backoff. Anything still failing afterwards, and any unusable
response, is reported as ``SourceUnavailable``.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp # type: ignore
from tenacity import AsyncRetrying, before_sleep_log, retry_if_exception_type, stop_after_attempt, wait_exponential # type: ignore

from .base import BaseClient
from .schemas import decode_categories_response, decode_clues_response
from ..constants import ENDPOINTS
from ..errors import SourceUnavailable
from ..utils.rate_limiter import RateLimiter


class TransientHTTPError(Exception):
    """Server-side HTTP failure worth retrying."""

    def __init__(self, status: int, url: str):
        super().__init__(f"HTTP {status} from {url}")
        self.status = status


RETRYABLE_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, TransientHTTPError)


class ClueBaseClient(BaseClient):
    """
    Async client for the cluebase service.

    Use as an async context manager so the underlying ``aiohttp`` session is
    closed when the game ends. A session can also be passed in, in which case
    the caller keeps ownership of it.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        super().__init__(settings)
        api_config = self.settings['api']

        self.base_url = api_config['base_url'].rstrip('/')
        self.timeout = aiohttp.ClientTimeout(total=api_config.get('timeout', 15))
        self.retry_config = api_config.get('retry', {})
        self.rate_limiter = RateLimiter(api_config.get('requests_per_minute', 60))

        self._session = session
        self._owns_session = session is None

    async def initialize(self) -> None:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
            self.logger.debug(f"Opened HTTP session for {self.base_url}")

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
            self.logger.debug(f"Closed HTTP session after {self.rate_limiter.request_count} requests "
                              f"({self.rate_limiter.total_wait:.1f}s spent rate limiting)")
        if self._owns_session:
            self._session = None

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.retry_config.get('attempts', 3)),
            wait=wait_exponential(
                multiplier=self.retry_config.get('multiplier', 1),
                min=self.retry_config.get('min_wait', 1),
                max=self.retry_config.get('max_wait', 8)
            ),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=before_sleep_log(self.logger, logging.WARNING),
            reraise=True
        )

    async def _get_json(self, path: str, params: Dict[str, str]) -> Any:
        """
        Issue a GET request and return the decoded JSON body.

        Raises:
            SourceUnavailable: On non-retryable HTTP status, invalid JSON, or
                when retries are exhausted
        """
        await self.initialize()
        url = f"{self.base_url}{path}"

        try:
            async for attempt in self._retrying():
                with attempt:
                    async with self.rate_limiter:
                        self.logger.debug(f"GET {url} params={params}")
                        async with self._session.get(url, params=params) as response:
                            if response.status >= 500:
                                raise TransientHTTPError(response.status, url)
                            if response.status != 200:
                                raise SourceUnavailable(f"HTTP {response.status} from {url}",
                                                        status=response.status)
                            try:
                                return await response.json(content_type=None)
                            except ValueError as e:
                                raise SourceUnavailable(f"Invalid JSON from {url}: {e}") from e
        except TransientHTTPError as e:
            self.logger.error(f"Giving up on {url}: {e}")
            raise SourceUnavailable(str(e), status=e.status) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error(f"Giving up on {url}: {e!r}")
            raise SourceUnavailable(f"Request to {url} failed: {e!r}") from e

    async def get_categories(self, limit: int, offset: int) -> List[str]:
        payload = await self._get_json(
            ENDPOINTS['categories'],
            {'limit': str(limit), 'offset': str(offset)}
        )
        names = decode_categories_response(payload)
        self.logger.info(f"Fetched {len(names)} category names (limit={limit}, offset={offset})")
        return names

    async def get_clues(self, category: str) -> List[Dict[str, str]]:
        payload = await self._get_json(ENDPOINTS['clues'], {'category': category})
        clues = decode_clues_response(payload)
        self.logger.debug(f"Fetched {len(clues)} clues for category {category!r}")
        return clues
