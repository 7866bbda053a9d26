import asyncio

from loguru import logger

from media_browser.core.constants import DIRECTOR_JOB, MAIN_CAST_LIMIT
from media_browser.core.exceptions import MetadataError
from media_browser.models.media import CastMember, ContentDetail, ContentKind, CrewMember
from media_browser.models.views import DetailView
from media_browser.services.stream.resolver import StreamResolver, get_stream_resolver
from media_browser.services.tmdb.service import TMDBService, get_tmdb_service


class DetailService:
    """
    Builds the watch page view model: detail, credits and a playback URL.
    """

    def __init__(self, tmdb_service: TMDBService | None = None, stream_resolver: StreamResolver | None = None):
        self.tmdb_service = tmdb_service or get_tmdb_service()
        self.stream_resolver = stream_resolver or get_stream_resolver()

    async def build(self, content_id: int, kind: ContentKind, season: int = 1, episode: int = 1) -> DetailView:
        notices: list[str] = []

        async def _load(coro, what: str) -> dict:
            try:
                return await coro
            except MetadataError as e:
                logger.warning(f"Could not load {what} for {kind.media_type}/{content_id}: {e}")
                notices.append(f"Could not load {what}.")
                return {}

        details, credits = await asyncio.gather(
            _load(self.tmdb_service.get_details(kind, content_id), "details"),
            _load(self.tmdb_service.get_credits(kind, content_id), "credits"),
        )

        # Movies resolve with season/episode 0; shows default to their first episode
        if kind is ContentKind.SHOWS:
            stream = await self.stream_resolver.resolve(content_id, tmdb=1, season=season, episode=episode)
        else:
            stream = await self.stream_resolver.resolve(content_id, tmdb=1)

        cast = [CastMember.model_validate(c) for c in (credits.get("cast") or [])[:MAIN_CAST_LIMIT]]
        director = next(
            (CrewMember.model_validate(c) for c in credits.get("crew") or [] if c.get("job") == DIRECTOR_JOB),
            None,
        )

        return DetailView(
            content_id=content_id,
            kind=kind,
            content=ContentDetail.from_tmdb(details, kind) if details.get("id") else None,
            cast=cast,
            director=director,
            stream_url=stream.url,
            season=season,
            episode=episode,
            notices=notices,
        )


def get_detail_service() -> DetailService:
    return DetailService()
