"""
Configuration settings for tldscan.

Uses Pydantic Settings to load environment variables for the TLD list source,
DNS lookup behavior, and logging. Per-invocation choices (SLD, flags, output
target) live in `tldscan.domain.models.RunConfig`; this module only carries
process-level knobs that rarely change between runs.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

IANA_TLD_URL = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # TLD source
    tld_list_url: str = Field(IANA_TLD_URL, alias="TLD_LIST_URL")
    fetch_timeout_seconds: float = Field(30.0, gt=0, alias="FETCH_TIMEOUT_SECONDS")

    # Availability checks
    lookup_timeout_seconds: float = Field(5.0, gt=0, alias="LOOKUP_TIMEOUT_SECONDS")
    check_concurrency: int = Field(100, ge=1, alias="CHECK_CONCURRENCY")
    strict_lookup: bool = Field(False, alias="STRICT_LOOKUP")

    # Pipeline
    startup_delay_seconds: float = Field(0.0, ge=0, alias="STARTUP_DELAY_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["IANA_TLD_URL", "Settings", "get_settings"]
