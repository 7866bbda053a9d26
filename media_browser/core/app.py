from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler as json_http_exception_handler
from fastapi.exception_handlers import request_validation_exception_handler as json_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from media_browser.api.main import api_router
from media_browser.services.stream.resolver import get_stream_resolver
from media_browser.services.tmdb.service import get_tmdb_service

from .config import settings
from .logging import setup_logging
from .templates import render_error
from .version import __version__

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    logger.info(f"{settings.APP_NAME} v{__version__} starting ({settings.APP_ENV})")
    yield
    for client in (get_tmdb_service(), get_stream_resolver()):
        try:
            await client.close()
        except Exception as exc:
            logger.warning(f"Failed to close {client.__class__.__name__} HTTP client: {exc}")


app = FastAPI(
    title="Minimal Media Browser",
    description="Server-rendered movie and TV browser over TMDB with embedded playback",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Serve static files
# media_browser/core/app.py -> media_browser/core -> media_browser
package_root = Path(__file__).resolve().parent.parent
static_dir = package_root / "static"

if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """JSON for /api routes, the page shell for everything else."""
    if request.url.path.startswith("/api/"):
        return await json_http_exception_handler(request, exc)
    title = "Not Found" if exc.status_code == 404 else "Something went wrong"
    return HTMLResponse(content=render_error(title, str(exc.detail)), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path or query values: JSON for /api routes, the page shell for everything else."""
    if request.url.path.startswith("/api/"):
        return await json_validation_exception_handler(request, exc)
    return HTMLResponse(content=render_error("Bad Request", "The requested address is not valid."), status_code=422)


app.include_router(api_router)
