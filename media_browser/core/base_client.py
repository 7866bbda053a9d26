from typing import Any

import httpx
from loguru import logger


class BaseClient:
    """
    Base asynchronous HTTP client with logging.

    Requests are issued once; callers decide what a failure means for them.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, headers: dict[str, str] | None = None):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, headers=self.headers, follow_redirects=True
            )
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, check_status: bool = True, **kwargs) -> httpx.Response:
        """Issue a single request. Raises httpx errors on transport failure or, if asked, non-2xx status."""
        client = await self.get_client()
        try:
            response = await client.request(method, url, **kwargs)
            if check_status:
                response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.error(f"Request failed ({method} {url}): HTTP {e.response.status_code}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request failed ({method} {url}): {e.__class__.__name__}: {e}")
            raise

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a GET request and return the JSON response."""
        response = await self._request("GET", url, params=params, **kwargs)
        return response.json()

    async def get_text(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> str:
        """Perform a GET request and return the raw body, whatever the status code."""
        response = await self._request("GET", url, check_status=False, params=params, **kwargs)
        return response.text
