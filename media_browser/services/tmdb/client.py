from typing import Any

import httpx

from media_browser.core.base_client import BaseClient
from media_browser.core.exceptions import MetadataError
from media_browser.core.version import __version__


class TMDBClient(BaseClient):
    """
    Client for interacting with the TMDB API.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.themoviedb.org/3",
        language: str = "en-US",
        timeout: float = 10.0,
    ):
        headers = {
            "User-Agent": f"MediaBrowser/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(base_url=base_url, timeout=timeout, headers=headers)
        self.api_key = api_key
        self.language = language

    async def _request(self, method: str, url: str, check_status: bool = True, **kwargs) -> httpx.Response:
        """Override request to always include API key and language."""
        params = kwargs.get("params", {})
        if params is None:
            params = {}
        params = {k: v for k, v in params.items() if v is not None and v != ""}
        params["api_key"] = self.api_key
        params["language"] = self.language
        kwargs["params"] = params
        return await super()._request(method, url, check_status=check_status, **kwargs)

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """GET a metadata endpoint. Any transport, status or decoding failure becomes a MetadataError."""
        try:
            return await super().get(url, params=params, **kwargs)
        except httpx.HTTPStatusError as e:
            raise MetadataError(url, f"HTTP {e.response.status_code}", status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            raise MetadataError(url, f"{e.__class__.__name__}: {e}") from e
        except ValueError as e:
            raise MetadataError(url, f"malformed JSON: {e}") from e
