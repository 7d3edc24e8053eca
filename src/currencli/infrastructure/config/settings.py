from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://v6.exchangerate-api.com/v6"


class AppSettings(BaseSettings):
    """
    Runtime settings for currencli.

    Loaded by pydantic-settings from the environment and an optional ``.env``
    file in the working directory.

    Groups:
    - Rate provider: root URL and request timeout
    - Storage: optional overrides for the credential and favorites files
    - Logging: level, renderer and optional rotating file (JSON mode)
    """

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_base_url: str = Field(alias="CURRENCLI_API_BASE_URL", default=DEFAULT_API_BASE_URL)
    http_timeout: float = Field(alias="CURRENCLI_HTTP_TIMEOUT", default=10.0)  # seconds

    # None -> <home>/.exchange-rate-api.txt
    credential_file: str | None = Field(alias="CURRENCLI_CREDENTIAL_FILE", default=None)
    favorites_file: str = Field(alias="CURRENCLI_FAVORITES_FILE", default="favorites.json")

    logging_enabled: bool = Field(alias="LOGGING_ENABLED", default=True)
    log_level: str = Field(alias="LOG_LEVEL", default="WARNING")
    json_logs: bool = Field(alias="JSON_LOGS", default=False)

    # Rotation options (used only when json_logs is true and log_file is set)
    log_file: str | None = Field(alias="LOG_FILE", default=None)
    log_rotation: Literal["time", "size"] = Field(alias="LOG_ROTATION", default="time")
    log_max_bytes: int = Field(alias="LOG_MAX_BYTES", default=1_048_576)  # 1 MiB
    log_backup_count: int = Field(alias="LOG_BACKUP_COUNT", default=3)
    log_rotate_when: str = Field(alias="LOG_ROTATE_WHEN", default="midnight")
    log_rotate_utc: bool = Field(alias="LOG_ROTATE_UTC", default=True)

    @field_validator("http_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject zero/negative timeouts."""
        if v <= 0:
            raise ValueError("CURRENCLI_HTTP_TIMEOUT must be positive")
        return v

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return process-wide settings loaded from ENV/.env (cached)."""
    return AppSettings()
