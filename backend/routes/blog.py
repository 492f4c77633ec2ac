"""Blog routes — aggregate stats and title search over the cached blog list."""

import logging

from fastapi import APIRouter, Depends, Query

from errors import ValidationError
from services.blog_analytics import analyze, search
from services.cache import BlogCache, get_blog_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/blog-stats")
async def blog_stats(cache: BlogCache = Depends(get_blog_cache)) -> dict:
    """Count, longest title, 'privacy' mentions and unique titles."""
    blogs = await cache.get()
    return analyze(blogs)


@router.get("/blog-search")
async def blog_search(
    query: str | None = Query(None),
    cache: BlogCache = Depends(get_blog_cache),
) -> list[dict]:
    """Blogs whose title contains ``query`` (case-insensitive).

    No matches is a valid empty result, not an error.
    """
    if not query:
        raise ValidationError()

    blogs = await cache.get()
    results = search(blogs, query)
    logger.info("Search %r matched %d of %d blogs", query, len(results), len(blogs))
    return results
