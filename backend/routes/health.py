"""Greeting, health and readiness check routes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from config import settings
from services.cache import BlogCache, get_blog_cache

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "blog-insights-api"


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello Everybody"


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha}


@router.get("/health")
async def health(cache: BlogCache = Depends(get_blog_cache)) -> dict:
    """Health check with blog cache state. Does not call the upstream API."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "commit": settings.git_sha,
        "cache": cache.status(),
    }
