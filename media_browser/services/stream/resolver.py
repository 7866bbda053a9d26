import functools

import httpx
from loguru import logger

from media_browser.core.base_client import BaseClient
from media_browser.core.config import settings
from media_browser.core.constants import EMBED_USER_AGENT, PLAYER_SETTINGS, STREAM_FETCH_FAILED, STREAM_URL_PREFIX
from media_browser.core.exceptions import StreamResolverError
from media_browser.models.media import StreamResult


def interpret_response(text: str) -> StreamResult:
    """A body starting with https:// is the playable URL; anything else is an error message."""
    if text.startswith(STREAM_URL_PREFIX):
        return StreamResult(url=text.rstrip())
    return StreamResult(error=text)


class StreamResolver(BaseClient):
    """
    Client for the embed redirector, which answers with a raw URL or an error string.
    """

    def __init__(self, base_url: str = "https://getsuperembed.link/", timeout: float = 10.0):
        super().__init__(timeout=timeout, headers={"User-Agent": EMBED_USER_AGENT})
        self.embed_url = base_url

    async def fetch(
        self,
        video_id: int | str,
        tmdb: int | str = 0,
        season: int | str = 0,
        episode: int | str = 0,
    ) -> str:
        """Fetch the raw response text. Transport failures raise StreamResolverError."""
        params = {
            "video_id": str(video_id),
            "tmdb": str(tmdb),
            "season": str(season),
            "episode": str(episode),
            **PLAYER_SETTINGS,
        }
        try:
            return await self.get_text(self.embed_url, params=params)
        except httpx.HTTPError as e:
            raise StreamResolverError(f"Embed redirector unreachable: {e}") from e

    async def resolve(
        self,
        video_id: int | str,
        tmdb: int | str = 0,
        season: int | str = 0,
        episode: int | str = 0,
    ) -> StreamResult:
        """Resolve a playback URL. Always returns a well-formed StreamResult."""
        try:
            text = await self.fetch(video_id, tmdb=tmdb, season=season, episode=episode)
        except StreamResolverError as e:
            logger.warning(f"Stream resolution failed for {video_id}: {e}")
            return StreamResult(error=STREAM_FETCH_FAILED, transport_failed=True)

        result = interpret_response(text)
        if result.error is not None:
            logger.info(f"Embed redirector returned no URL for {video_id} (s={season}, e={episode}): {result.error}")
        return result


@functools.lru_cache(maxsize=1)
def get_stream_resolver() -> StreamResolver:
    return StreamResolver(base_url=settings.EMBED_BASE_URL, timeout=settings.REQUEST_TIMEOUT)
