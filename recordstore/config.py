"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the library works with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - RECORDSTORE_ prefix: the library shares the environment with its host application
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recordstore.core.domain_types import Locale


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RECORDSTORE_", case_sensitive=False,
        extra="ignore",
    )

    # Store
    store_name: str = "records"
    default_locale: Locale = Locale.EN

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
