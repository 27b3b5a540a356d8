"""HTTP fetching of recipe pages."""

from typing import Any

import httpx

from recipecollector.config import get_settings
from recipecollector.logging_config import get_logger

logger = get_logger(__name__)


class ScrapeError(Exception):
    """Base exception for recipe scraping errors."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class FetchError(ScrapeError):
    """Raised when a recipe page cannot be downloaded."""


class RecipeNotFoundError(ScrapeError):
    """Raised when a page holds no recognizable recipe (no title)."""


class RecipeFetcher:
    """Downloads recipe pages over HTTP. No retries: one request per call."""

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self.user_agent = user_agent or settings.user_agent
        self.timeout = timeout or settings.scraping_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={
                    "Accept": "text/html,application/xhtml+xml",
                    "User-Agent": self.user_agent,
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch_html(self, url: str) -> str:
        """
        Fetch a recipe page.

        Args:
            url: Page URL.

        Returns:
            The response body as text.

        Raises:
            FetchError: On network failure, timeout or an HTTP error status.
        """
        client = await self._get_client()
        logger.debug(f"Fetching recipe page: {url}")

        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request failed for {url}: {e}")
            raise FetchError(f"Failed to fetch recipe page: {e}", url=url) from e

        if response.status_code >= 400:
            logger.error(f"HTTP {response.status_code} for {url}")
            raise FetchError(
                f"Failed to fetch recipe page (status {response.status_code})",
                status_code=response.status_code,
                url=url,
            )

        return response.text

    async def __aenter__(self) -> "RecipeFetcher":
        """Async context manager entry."""
        await self._get_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()
