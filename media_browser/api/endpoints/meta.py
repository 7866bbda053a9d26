from fastapi import APIRouter, HTTPException
from loguru import logger

from media_browser.core.exceptions import MetadataError
from media_browser.services.tmdb.service import get_tmdb_service

router = APIRouter(tags=["meta"])


@router.get("/api/seasons/{show_id}")
async def get_seasons(show_id: int):
    """Passthrough of the upstream show detail, which lists the show's seasons."""
    try:
        return await get_tmdb_service().get_tv_details(show_id)
    except MetadataError as e:
        logger.error(f"Failed to fetch seasons for show {show_id}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch seasons from TMDB")


@router.get("/api/episodes/{show_id}/{season}")
async def get_episodes(show_id: int, season: int):
    """Passthrough of the upstream season detail, which lists its episodes."""
    try:
        return await get_tmdb_service().get_season(show_id, season)
    except MetadataError as e:
        logger.error(f"Failed to fetch episodes for show {show_id} season {season}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch episodes from TMDB")
