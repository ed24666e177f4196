"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - No credentials hardcoded; everything overridable from the environment or .env
    - get_settings() is cached (lru_cache) — single instance per process
    - cors_origins defaults to exactly one origin (the React dev server)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SQLite via aiosqlite by default: the demo ships as a single file database
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./database.db"
    database_auto_create: bool = True
    database_pool_size: int = 5
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # Random user seeding
    random_user_api_url: str = "https://randomuser.me/api/"
    random_user_timeout_seconds: float = 10.0
    random_user_max_retries: int = 3
    random_user_base_delay_ms: int = 500
    populate_count: int = 3

    # bcrypt cost factor
    password_hash_rounds: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
