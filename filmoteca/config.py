"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables or .env (never hardcoded in code paths)
    - get_settings() is cached (lru_cache): single instance per process
    - genre_duplicate_status is restricted to 408 (legacy) or 409
    - locale matches Locale values ignoring case

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: the service runs against a local PostgreSQL without a .env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from filmoteca.core.domain_types import Locale
from filmoteca.core.language_strings import match_locale


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://filmoteca:filmoteca@db:5432/filmoteca"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False
    database_auto_create: bool = True

    # Catalog behavior
    genre_duplicate_status: int = 409

    @field_validator("genre_duplicate_status")
    @classmethod
    def check_duplicate_status(cls, v: int) -> int:
        if v not in (408, 409):
            raise ValueError("genre_duplicate_status must be 408 or 409")
        return v

    # Responses
    locale: Locale = Locale.EN

    @field_validator("locale", mode="before")
    @classmethod
    def match_locale_ignoring_case(cls, v):
        """LOCALE=pt-br and LOCALE=PT-BR both select Locale.PT_BR; unknown values still fail."""
        if isinstance(v, str):
            return match_locale(v) or v
        return v

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
