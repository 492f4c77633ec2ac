"""Centralized configuration — all env vars in one place."""

import os

DEFAULT_BLOG_API_URL = "https://intent-kit-16.hasura.app/api/rest/blogs"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Upstream blog API (Hasura REST)
        self.blog_api_url: str = os.getenv("BLOG_API_URL", DEFAULT_BLOG_API_URL)
        self.blog_api_admin_secret: str | None = os.getenv("BLOG_API_ADMIN_SECRET")
        self.blog_api_timeout: float = float(os.getenv("BLOG_API_TIMEOUT", "10"))

        # 60 minutes x 60 seconds
        self.blog_cache_seconds: float = float(os.getenv("BLOG_CACHE_SECONDS", "3600"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars for upstream access."""
        required = ["BLOG_API_ADMIN_SECRET"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "BLOG_API_ADMIN_SECRET": "blog_api_admin_secret",
    }
    return mapping.get(env_var, env_var.lower())
