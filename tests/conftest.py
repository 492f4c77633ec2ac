# tests/conftest.py
"""Shared fixtures: sample blog data, a controllable upstream and an app client."""

from collections.abc import AsyncGenerator, Callable

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from app import create_app
from errors import UpstreamError
from services.cache import BlogCache, get_blog_cache

SAMPLE_BLOGS = [
    {"id": "1", "title": "Privacy Policy", "image_url": "https://example.com/1.png"},
    {"id": "2", "title": "Hello World", "image_url": "https://example.com/2.png"},
    {"id": "3", "title": "Hello World", "image_url": "https://example.com/3.png"},
]


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Async fetch callable that records calls and can be told to fail."""

    def __init__(self, blogs: list[dict] | None = None) -> None:
        self.blogs = list(SAMPLE_BLOGS) if blogs is None else blogs
        self.calls = 0
        self.error: Exception | None = None

    async def __call__(self) -> list[dict]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.blogs

    def fail_with(self, detail: str = "connection refused") -> None:
        self.error = UpstreamError(detail)


@fixture
def sample_blogs() -> list[dict]:
    return [dict(blog) for blog in SAMPLE_BLOGS]


@fixture
def clock() -> FakeClock:
    return FakeClock()


@fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@fixture
def blog_cache(upstream: FakeUpstream, clock: FakeClock) -> BlogCache:
    return BlogCache(upstream, ttl_seconds=3600, clock=clock)


@fixture
def make_client(blog_cache: BlogCache) -> Callable[..., AsyncClient]:
    """Build an AsyncClient against a fresh app wired to the test cache."""

    def _make(raise_app_exceptions: bool = True) -> AsyncClient:
        app = create_app()
        app.dependency_overrides[get_blog_cache] = lambda: blog_cache
        return AsyncClient(
            base_url="http://test",
            transport=ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions),
        )

    return _make


@fixture
async def client(make_client: Callable[..., AsyncClient]) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing FastAPI endpoints."""
    async with make_client() as ac:
        yield ac
