"""Shared test fixtures for the media browser test suite."""

from __future__ import annotations

import os

# Settings are read at import time and the API key is mandatory
os.environ.setdefault("TMDB_API_KEY", "test-api-key")

from typing import Any  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import respx  # noqa: E402

from media_browser.models.media import StreamResult  # noqa: E402
from media_browser.services.stream.resolver import StreamResolver  # noqa: E402
from media_browser.services.tmdb.service import TMDBService  # noqa: E402

TMDB_BASE = "https://api.themoviedb.org/3"
EMBED_URL = "https://getsuperembed.link/"

# ---------------------------------------------------------------------------
# Upstream JSON fixtures
# ---------------------------------------------------------------------------

COUNTRIES = [
    {"iso_3166_1": "US", "english_name": "United States of America"},
    {"iso_3166_1": "DE", "english_name": "Germany"},
]

MOVIE_GENRES = {"genres": [{"id": 28, "name": "Action"}, {"id": 16, "name": "Animation"}, {"id": 35, "name": "Comedy"}]}
TV_GENRES = {"genres": [{"id": 10759, "name": "Action & Adventure"}, {"id": 16, "name": "Animation"}]}


def movie(movie_id: int, title: str = "", **extra: Any) -> dict[str, Any]:
    return {
        "id": movie_id,
        "title": title or f"Movie {movie_id}",
        "poster_path": f"/poster{movie_id}.jpg",
        "overview": f"Overview of movie {movie_id}",
        "release_date": "1999-03-31",
        **extra,
    }


def show(show_id: int, name: str = "", **extra: Any) -> dict[str, Any]:
    return {
        "id": show_id,
        "name": name or f"Show {show_id}",
        "poster_path": f"/poster{show_id}.jpg",
        "overview": f"Overview of show {show_id}",
        "first_air_date": "2008-01-20",
        **extra,
    }


def page_of(results: list[dict[str, Any]], page: int = 1, total_pages: int = 1, total_results: int | None = None):
    return {
        "page": page,
        "results": results,
        "total_pages": total_pages,
        "total_results": len(results) if total_results is None else total_results,
    }


# ---------------------------------------------------------------------------
# Service doubles
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmdb() -> MagicMock:
    """TMDBService double with canned responses for every call."""
    service = MagicMock(spec=TMDBService)
    service.get_countries = AsyncMock(return_value=COUNTRIES)
    service.get_genres = AsyncMock(
        side_effect=lambda kind: MOVIE_GENRES if kind.media_type == "movie" else TV_GENRES
    )
    service.search_multi = AsyncMock(return_value=page_of([]))
    service.search = AsyncMock(return_value=page_of([]))
    service.discover = AsyncMock(return_value=page_of([]))
    service.discover_by_person = AsyncMock(return_value=page_of([]))
    service.get_details = AsyncMock(return_value={})
    service.get_credits = AsyncMock(return_value={"cast": [], "crew": []})
    return service


@pytest.fixture()
def resolver() -> MagicMock:
    stream_resolver = MagicMock(spec=StreamResolver)
    stream_resolver.resolve = AsyncMock(return_value=StreamResult(url="https://example.com/embed/abc"))
    return stream_resolver


@pytest.fixture()
def upstream():
    with respx.mock(assert_all_called=False) as mock:
        yield mock
