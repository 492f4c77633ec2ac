"""Hasura blog API client — the single upstream data source.

Returns the raw ``blogs`` array. Every failure mode (network, timeout,
non-2xx, unexpected body) is raised as UpstreamError so callers only
have one exception to map.
"""

import logging

import httpx

from config import settings
from errors import UpstreamError

logger = logging.getLogger(__name__)

ADMIN_SECRET_HEADER = "x-hasura-admin-secret"


async def fetch_blogs(client: httpx.AsyncClient | None = None) -> list[dict]:
    """Fetch the full blog list from the upstream API.

    Args:
        client: Optional preconfigured client (tests pass one with a mock
            transport). When omitted, a short-lived client is opened with
            the configured timeout.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=settings.blog_api_timeout) as own_client:
            return await _get_blogs(own_client)
    return await _get_blogs(client)


async def _get_blogs(client: httpx.AsyncClient) -> list[dict]:
    headers = {}
    if settings.blog_api_admin_secret:
        headers[ADMIN_SECRET_HEADER] = settings.blog_api_admin_secret

    try:
        resp = await client.get(settings.blog_api_url, headers=headers)
        resp.raise_for_status()
        payload = resp.json()
    except httpx.TimeoutException as e:
        logger.error("Blog API timed out after %ss: %s", settings.blog_api_timeout, e)
        raise UpstreamError(f"timeout: {e}") from e
    except httpx.HTTPError as e:
        logger.error("Blog API request failed: %s", e)
        raise UpstreamError(str(e)) from e
    except ValueError as e:
        logger.error("Blog API returned invalid JSON: %s", e)
        raise UpstreamError(f"invalid JSON: {e}") from e

    blogs = payload.get("blogs") if isinstance(payload, dict) else None
    if not isinstance(blogs, list):
        logger.error("Blog API response has no 'blogs' list (got %s)", type(payload).__name__)
        raise UpstreamError("response missing 'blogs' list")

    logger.info("Fetched %d blogs from upstream", len(blogs))
    return blogs
