from fastapi import APIRouter

from .endpoints.health import router as health_router
from .endpoints.meta import router as meta_router
from .endpoints.pages import router as pages_router
from .endpoints.streams import router as streams_router

api_router = APIRouter()

api_router.include_router(pages_router)
api_router.include_router(streams_router)
api_router.include_router(meta_router)
api_router.include_router(health_router)
