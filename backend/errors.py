"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error, please try again later"
UPSTREAM_ERROR_MESSAGE = "Looks like our third-party API is not working, try again later"


class BlogApiError(Exception):
    """Base exception with HTTP status code and a client-safe message."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(BlogApiError):
    def __init__(self, message: str = "Couldn't find query string"):
        super().__init__(message, status_code=400)


class UpstreamError(BlogApiError):
    """Upstream fetch failed. ``detail`` is for logs only, never for clients."""

    def __init__(self, detail: str = ""):
        super().__init__(UPSTREAM_ERROR_MESSAGE, status_code=502)
        self.detail = detail


class InternalError(BlogApiError):
    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message, status_code=500)


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(BlogApiError)
    async def handle_blog_api_error(request: Request, exc: BlogApiError):
        if exc.status_code >= 500:
            logger.error(
                "%s on %s: %s",
                type(exc).__name__,
                request.url.path,
                getattr(exc, "detail", "") or exc.message,
            )
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(error_body(exc.message), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s: %s", request.url.path, exc)
        internal = InternalError()
        return JSONResponse(error_body(internal.message), status_code=internal.status_code)
