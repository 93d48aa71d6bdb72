"""
Configuration management using pydantic-settings.

Loads configuration from environment variables and .env files.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """deckcache settings loaded from environment variables.

    Optional credentials:
        GH_TOKEN: GitHub token; required for GraphQL project lookups.
        ITAD_API_KEY: IsThereAnyDeal API key; required for pricing.
        BLOGGER_API_KEY: Key for the reports-summary worker.

    Store:
        REDIS_URL: When set, Redis is used; otherwise an in-memory store.
        CACHE_KEY_PREFIX: Namespace for every key in the store.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # GitHub
    GH_TOKEN: str | None = Field(default=None, description="GitHub API token")
    GITHUB_REPO_OWNER: str = Field(
        default="DeckSettings", description="Owner of the game reports repository"
    )
    GITHUB_REPORTS_REPO: str = Field(
        default="game-reports-steamos", description="Game reports repository name"
    )
    GITHUB_ORG_NODE_ID: str = Field(
        default="O_kgDOC35waw", description="GraphQL node id of the projects organization"
    )
    GITHUB_API_URL: str = Field(default="https://api.github.com")
    GITHUB_RAW_URL: str = Field(default="https://raw.githubusercontent.com")
    GRAPHQL_ABORT_ON_PARTIAL_ERRORS: bool = Field(
        default=False,
        description="Abort a multi-page GraphQL walk when a page carries partial errors",
    )

    # Store
    REDIS_URL: str | None = Field(default=None, description="Redis connection URL")
    CACHE_KEY_PREFIX: str = Field(default="deckcache", description="Store key namespace")
    CACHE_MAX_SIZE: int = Field(
        default=10_000, ge=1, description="Entries kept by the in-memory store"
    )
    DEFAULT_CACHE_TIME: int = Field(
        default=600, ge=2, description="TTL in seconds of the recent/popular report lists"
    )

    # IsThereAnyDeal
    ITAD_API_KEY: str | None = Field(default=None, description="IsThereAnyDeal API key")
    ITAD_COUNTRY: str = Field(default="US", description="Country for price lookups")

    # Reports summary worker
    BLOGGER_API_KEY: str | None = Field(default=None, description="Summary worker API key")
    BLOGGER_URL: str | None = Field(default=None, description="Summary worker endpoint")

    # HTTP
    HTTP_TIMEOUT_SECONDS: float = Field(default=20.0, gt=0.0)
    USER_AGENT: str = Field(default="deckcache/0.1 (+https://github.com/DeckSettings)")

    @field_validator("ITAD_COUNTRY")
    @classmethod
    def validate_country(cls, v: str) -> str:
        """Country codes are two upper-case letters."""
        v = v.strip().upper()
        if len(v) != 2 or not v.isalpha():
            raise ValueError("ITAD_COUNTRY must be a two-letter country code")
        return v

    @property
    def reports_repo(self) -> str:
        """``owner/repo`` of the game reports repository."""
        return f"{self.GITHUB_REPO_OWNER}/{self.GITHUB_REPORTS_REPO}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
