"""HTTP page fetcher adapter.

Implements the core PageFetcherPort on top of httpx. Transport problems are
returned as NetworkFailure values; non-200 statuses are returned as-is and
judged by the core.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from core.models import FetchOutcome, FetchResponse, NetworkFailure

LOGGER = logging.getLogger(__name__)


class HttpxPageFetcher:
    """Single-shot GET fetcher with a shared connection pool."""

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        max_redirects: int = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout_seconds
        headers = {
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            follow_redirects=True,
            max_redirects=max_redirects,
            headers=headers,
            transport=transport,
        )

    async def fetch(self, url: str, user_agent: str) -> FetchOutcome:
        """GET ``url`` once and return its status and decoded body."""

        try:
            response = await self._client.get(url, headers={"User-Agent": user_agent})
        except httpx.TimeoutException as e:
            LOGGER.warning("Timeout after %ss for %s", self._timeout, url)
            return NetworkFailure(url=url, reason=f"Timeout after {self._timeout}s: {e}")
        except httpx.TransportError as e:
            LOGGER.warning("Connection error for %s: %s", url, e)
            return NetworkFailure(url=url, reason=f"Connection error: {e}")
        except httpx.TooManyRedirects as e:
            LOGGER.warning("Too many redirects for %s: %s", url, e)
            return NetworkFailure(url=url, reason=f"Too many redirects: {e}")

        LOGGER.debug("GET %s -> %s (%s)", url, response.status_code, response.url)
        return FetchResponse(url=str(response.url), status_code=response.status_code, body=response.text)

    async def aclose(self) -> None:
        await self._client.aclose()
