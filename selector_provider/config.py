from pathlib import Path
from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =========================
# Configuration (ENV-DRIVEN via Pydantic)
# =========================


class Settings(BaseSettings):
    """Settings read from environment and validated by Pydantic.

    Only a single `.env` file at the project root is read. Real environment
    variables always take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
    )

    # Provider behaviour
    placeholder_count: int = Field(default=10, ge=0, alias="PLACEHOLDER_COUNT")
    show_placeholders_while_loading: bool = Field(default=True, alias="SHOW_PLACEHOLDERS_WHILE_LOADING")
    show_error_item: bool = Field(default=True, alias="SHOW_ERROR_ITEM")
    enable_change_detection: bool = Field(default=True, alias="ENABLE_CHANGE_DETECTION")

    # Data source
    data_source: Literal["SYNTHETIC", "REST", "SQL"] = Field(default="SYNTHETIC", alias="DATA_SOURCE")
    api_base_url: str = Field(default="", alias="API_BASE_URL")
    db_url: str = Field(default="", alias="DB_URL")
    max_rows: int = Field(default=500, ge=1, alias="MAX_ROWS")
    query_retry: int = Field(default=3, ge=0, alias="QUERY_RETRY")
    query_retry_delay_seconds: float = Field(default=1.0, ge=0, alias="QUERY_RETRY_DELAY_SECONDS")
    query_retry_max_delay_seconds: float = Field(default=30.0, ge=0, alias="QUERY_RETRY_MAX_DELAY_SECONDS")
    request_timeout_seconds: float = Field(default=30, gt=0, alias="REQUEST_TIMEOUT_SECONDS")

    # Cache
    cache_type: Literal["SimpleCache", "NullCache", "RedisCache"] = Field(default="SimpleCache", alias="CACHE_TYPE")
    cache_timeout_seconds: int = Field(default=300, ge=0, alias="CACHE_TIMEOUT_SECONDS")
    redis_url: Optional[str] = Field(default=None, alias="REDIS_URL")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: Literal["json", "plain"] = Field(default="json", alias="LOG_FORMAT")

    @field_validator("data_source", "log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


class ProviderOptions(BaseModel):
    """Options recognised by SelectorDataProvider."""

    model_config = ConfigDict(frozen=True)

    placeholder_count: int = Field(default=10, ge=0)
    show_placeholders_while_loading: bool = True
    show_error_item: bool = True
    enable_change_detection: bool = True

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ProviderOptions":
        s = settings or get_settings()
        return cls(
            placeholder_count=s.placeholder_count,
            show_placeholders_while_loading=s.show_placeholders_while_loading,
            show_error_item=s.show_error_item,
            enable_change_detection=s.enable_change_detection,
        )


# Singleton accessor to avoid repeated disk reads/parsing
_settings_singleton: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the singleton Settings instance, initializing it on first call."""
    global _settings_singleton
    if _settings_singleton is None:
        _settings_singleton = Settings()
    return _settings_singleton
