"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KAKAO_REST_API_URL = "https://dapi.kakao.com/v2/search"


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DAUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default=KAKAO_REST_API_URL,
        description="Search endpoint; the service name is appended as a path segment.",
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout. None waits for the provider indefinitely.",
    )
    app_key: SecretStr | None = Field(
        default=None,
        description="Fallback Authorization value used when a call passes no credential.",
    )
    log_level: str = "INFO"

    @field_validator("request_timeout_seconds", "app_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached settings instance."""

    return ClientSettings()


__all__ = ["ClientSettings", "KAKAO_REST_API_URL", "get_settings"]
