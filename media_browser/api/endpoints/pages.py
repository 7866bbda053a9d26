from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from media_browser.core.templates import render_detail, render_listing
from media_browser.models.media import ContentKind
from media_browser.services.detail import get_detail_service
from media_browser.services.listing import get_listing_service
from media_browser.utils.query import parse_int, parse_kind, parse_listing_query

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def listing_page(request: Request):
    """Filterable listing of movies and shows."""
    query = parse_listing_query(request.query_params)
    view = await get_listing_service().build(query, params=list(request.query_params.multi_items()))
    return HTMLResponse(content=render_listing(view), media_type="text/html")


@router.get("/watch/{content_id}", response_class=HTMLResponse)
async def watch_page(request: Request, content_id: int):
    """Detail and playback page for a single title."""
    # An explicit empty type means nothing on this page
    kind = parse_kind(request.query_params.get("type")) or ContentKind.MOVIES
    season = parse_int(request.query_params.get("s"))
    episode = parse_int(request.query_params.get("e"))
    view = await get_detail_service().build(content_id, kind, season=season, episode=episode)
    return HTMLResponse(content=render_detail(view), media_type="text/html")
