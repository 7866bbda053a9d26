import asyncio
from enum import Enum
from typing import Any, Awaitable, TypeVar

from loguru import logger

from media_browser.core.exceptions import MetadataError
from media_browser.models.media import ContentKind, ContentSummary, Country, Genre, ListingQuery
from media_browser.models.views import ListingView, Pagination
from media_browser.services.tmdb.genre import merge_genres
from media_browser.services.tmdb.service import TMDBService, get_tmdb_service, year_range_params
from media_browser.utils.pagination import total_pages_for
from media_browser.utils.query import year_options

T = TypeVar("T")

LISTABLE_MEDIA_TYPES = ("movie", "tv")


class QueryPlan(str, Enum):
    PERSON_SEARCH = "person_search"
    MULTI_TYPE_SEARCH = "multi_type_search"
    TYPED = "typed"


def classify_query(query: ListingQuery) -> QueryPlan:
    """Pick exactly one plan. Person search beats multi-type search, which beats typed search/discover."""
    if query.with_people and not query.query:
        return QueryPlan.PERSON_SEARCH
    if query.query and query.kind is None:
        return QueryPlan.MULTI_TYPE_SEARCH
    return QueryPlan.TYPED


class ListingService:
    """
    Builds the listing page view model from a ListingQuery.

    Metadata failures degrade: the failing piece is replaced by an empty value,
    a notice is added to the view and the page still renders.
    """

    def __init__(self, tmdb_service: TMDBService | None = None):
        self.tmdb_service = tmdb_service or get_tmdb_service()

    async def _safe(self, coro: Awaitable[T], fallback: T, notices: list[str], what: str) -> T:
        try:
            return await coro
        except MetadataError as e:
            logger.warning(f"Could not load {what}: {e}")
            notices.append(f"Could not load {what}.")
            return fallback

    async def build(self, query: ListingQuery, params: list[tuple[str, str]] | None = None) -> ListingView:
        notices: list[str] = []
        plan = classify_query(query)
        logger.debug(f"Listing plan {plan.value} for kind={query.kind} q={query.query!r} page={query.page}")

        countries_task = self._safe(self.tmdb_service.get_countries(), [], notices, "countries")
        if plan is QueryPlan.PERSON_SEARCH:
            results_task = self._person_search(query, notices)
        elif plan is QueryPlan.MULTI_TYPE_SEARCH:
            results_task = self._multi_type_search(query, notices)
        else:
            results_task = self._typed(query, notices)

        countries, (items, pagination, genres) = await asyncio.gather(countries_task, results_task)

        return ListingView(
            items=items,
            pagination=pagination,
            genres=genres,
            countries=[Country.model_validate(c) for c in countries],
            year_options=year_options(),
            filters=query,
            params=params or [],
            notices=notices,
        )

    def _filters(self, kind: ContentKind, query: ListingQuery) -> dict[str, Any]:
        filters: dict[str, Any] = {"sort_by": query.sort_by, "page": query.page}
        filters.update(year_range_params(kind, query.year))
        if query.genre:
            filters["with_genres"] = query.genre
        return filters

    async def _genres(self, kind: ContentKind, notices: list[str]) -> list[Genre]:
        data = await self._safe(self.tmdb_service.get_genres(kind), {}, notices, "genres")
        return merge_genres(data.get("genres", []))

    @staticmethod
    def _pagination(data: dict[str, Any], page: int) -> Pagination:
        return Pagination(
            page=data.get("page") or page,
            total_pages=data.get("total_pages") or 0,
            total_results=data.get("total_results") or 0,
        )

    async def _person_search(self, query: ListingQuery, notices: list[str]):
        kind = query.kind or ContentKind.MOVIES
        filters = self._filters(kind, query)
        if query.country:
            filters["with_origin_country"] = query.country

        data, genres = await asyncio.gather(
            self._safe(
                self.tmdb_service.discover_by_person(kind, query.with_people, **filters), {}, notices, "titles"
            ),
            self._genres(kind, notices),
        )
        items = [ContentSummary.from_tmdb(item, kind) for item in data.get("results", [])]
        return items, self._pagination(data, query.page), genres

    async def _multi_type_search(self, query: ListingQuery, notices: list[str]):
        data, movie_genres, tv_genres = await asyncio.gather(
            self._safe(self.tmdb_service.search_multi(query.query, page=query.page), {}, notices, "search results"),
            self._safe(self.tmdb_service.get_genres(ContentKind.MOVIES), {}, notices, "movie genres"),
            self._safe(self.tmdb_service.get_genres(ContentKind.SHOWS), {}, notices, "TV genres"),
        )
        results = data.get("results", [])
        items = [
            ContentSummary.from_tmdb(item, ContentKind.from_media_type(item["media_type"]))
            for item in results
            if item.get("media_type") in LISTABLE_MEDIA_TYPES
        ]
        total_results = data.get("total_results") or 0
        pagination = Pagination(
            page=query.page,
            total_pages=total_pages_for(total_results, len(results)),
            total_results=total_results,
        )
        genres = merge_genres(movie_genres.get("genres", []), tv_genres.get("genres", []))
        return items, pagination, genres

    async def _typed(self, query: ListingQuery, notices: list[str]):
        kind = query.kind or ContentKind.MOVIES
        filters = self._filters(kind, query)
        if query.query:
            results_coro = self.tmdb_service.search(kind, query.query, **filters)
        else:
            if query.country:
                filters["with_origin_country"] = query.country
            results_coro = self.tmdb_service.discover(kind, **filters)

        data, genres = await asyncio.gather(
            self._safe(results_coro, {}, notices, "titles"),
            self._genres(kind, notices),
        )
        items = [ContentSummary.from_tmdb(item, kind) for item in data.get("results", [])]
        if kind is ContentKind.MOVIES and items:
            items = await self._backfill_runtimes(items, notices)
        return items, self._pagination(data, query.page), genres

    async def _backfill_runtimes(self, items: list[ContentSummary], notices: list[str]) -> list[ContentSummary]:
        """One detail fetch per movie; a failed fetch keeps the item without a runtime."""
        failures: list[str] = []

        async def _fetch(item: ContentSummary) -> ContentSummary:
            details = await self._safe(
                self.tmdb_service.get_details(ContentKind.MOVIES, item.id),
                {},
                failures,
                f"runtime for {item.id}",
            )
            runtime = details.get("runtime")
            return item.model_copy(update={"runtime": runtime or None})

        backfilled = await asyncio.gather(*[_fetch(item) for item in items])
        if failures:
            notices.append(f"Runtime unavailable for {len(failures)} of {len(items)} titles.")
        return list(backfilled)


def get_listing_service() -> ListingService:
    return ListingService()
