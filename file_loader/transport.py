"""HTTP transport for remote file fetches."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpxFetcher:
    """Fetches remote text with httpx.

    Owns its AsyncClient unless one is passed in. Call ``aclose()`` (or use
    ``async with``) to release an owned client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        follow_redirects: bool = True,
    ):
        """Initialize fetcher.

        Args:
            client: Pre-configured client (e.g. with a mock transport). Not closed by ``aclose()``.
            timeout: Request timeout in seconds for an owned client
            follow_redirects: Whether an owned client follows redirects
        """
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=self.follow_redirects)
        return self._client

    async def get_text(self, url: str, content_type: str = "text") -> str:
        """GET url and return the response body.

        Raises:
            httpx.HTTPError: Request failed or returned an error status
        """
        logger.debug(f"Fetching {url}")
        response = await self._get_client().get(url, headers={"Content-Type": content_type})
        response.raise_for_status()
        return response.text

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxFetcher:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
