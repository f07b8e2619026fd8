"""Top-level API router — includes the endpoint routers under /api."""

from fastapi import APIRouter

from blogful.presentation.api.endpoints.health import router as health_router
from blogful.presentation.api.endpoints.articles import router as articles_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(articles_router)
