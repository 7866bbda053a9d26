from fastapi import APIRouter
from fastapi.responses import JSONResponse

from media_browser.services.stream.resolver import get_stream_resolver

router = APIRouter(tags=["stream"])


@router.get("/api/stream/{video_id}")
async def get_stream(video_id: str, tmdb: str = "0", s: str = "0", e: str = "0"):
    """
    Resolve a playback URL through the embed redirector.

    Returns {"url": ...} or {"error": ...}; only a transport failure yields HTTP 500.
    """
    result = await get_stream_resolver().resolve(video_id, tmdb=tmdb or "0", season=s or "0", episode=e or "0")
    status_code = 500 if result.transport_failed else 200
    return JSONResponse(content=result.payload(), status_code=status_code)
