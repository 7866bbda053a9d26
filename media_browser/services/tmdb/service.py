import functools
from typing import Any

from media_browser.core.config import settings
from media_browser.models.media import ContentKind
from media_browser.services.tmdb.client import TMDBClient


def year_range_params(kind: ContentKind, year: str | int | None) -> dict[str, str]:
    """Date-range filter covering January 1 to December 31 of `year`."""
    if not year:
        return {}
    field = kind.date_field
    return {f"{field}.gte": f"{year}-01-01", f"{field}.lte": f"{year}-12-31"}


class TMDBService:
    """
    Service for interacting with The Movie Database (TMDB) API.

    Every method issues exactly one request and returns the parsed JSON untouched.
    Failures surface as MetadataError.
    """

    def __init__(
        self,
        api_key: str,
        language: str = "en-US",
        base_url: str = "https://api.themoviedb.org/3",
        timeout: float = 10.0,
    ):
        self.client = TMDBClient(api_key=api_key, base_url=base_url, language=language, timeout=timeout)

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.close()

    async def get_countries(self) -> list[dict[str, Any]]:
        return await self.client.get("/configuration/countries")

    async def get_genres(self, kind: ContentKind) -> dict[str, Any]:
        return await self.client.get(f"/genre/{kind.media_type}/list")

    async def search_multi(self, query: str, page: int = 1) -> dict[str, Any]:
        """Search movies, TV shows and people at once."""
        params = {"query": query, "include_adult": "false", "page": page}
        return await self.client.get("/search/multi", params=params)

    async def search(self, kind: ContentKind, query: str, page: int = 1, **filters) -> dict[str, Any]:
        params = {"query": query, "page": page, **filters}
        return await self.client.get(f"/search/{kind.media_type}", params=params)

    async def discover(
        self,
        kind: ContentKind,
        sort_by: str = "popularity.desc",
        page: int = 1,
        year: str | None = None,
        with_genres: str | None = None,
        **kwargs,
    ) -> dict[str, Any]:
        """Discover content by structured filters."""
        params = {"sort_by": sort_by, "page": page, **year_range_params(kind, year)}
        if with_genres:
            params["with_genres"] = with_genres
        params.update(kwargs)
        return await self.client.get(f"/discover/{kind.media_type}", params=params)

    async def discover_by_person(self, kind: ContentKind, person_id: str, **kwargs) -> dict[str, Any]:
        """Discover titles whose cast includes `person_id`."""
        return await self.discover(kind, with_cast=person_id, **kwargs)

    async def get_details(self, kind: ContentKind, content_id: int | str) -> dict[str, Any]:
        return await self.client.get(f"/{kind.media_type}/{content_id}")

    async def get_credits(self, kind: ContentKind, content_id: int | str) -> dict[str, Any]:
        return await self.client.get(f"/{kind.media_type}/{content_id}/credits")

    async def get_tv_details(self, tv_id: int | str) -> dict[str, Any]:
        return await self.get_details(ContentKind.SHOWS, tv_id)

    async def get_season(self, tv_id: int | str, season_number: int | str) -> dict[str, Any]:
        return await self.client.get(f"/tv/{tv_id}/season/{season_number}")


@functools.lru_cache(maxsize=1)
def get_tmdb_service() -> TMDBService:
    return TMDBService(
        api_key=settings.TMDB_API_KEY,
        language=settings.TMDB_LANGUAGE,
        base_url=settings.TMDB_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT,
    )
