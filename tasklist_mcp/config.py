"""Server configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Load configuration from ``TASKLIST_*`` environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    notification_interval_seconds: float = Field(
        default=1200.0,
        gt=0,
        description="Seconds between pending-task notification checks",
    )
    notification_display_limit: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Number of log entries shown by default",
    )
    notify_on_change: bool = Field(
        default=False,
        description="Also run a notification check whenever the task list changes",
    )
    search_debounce_seconds: float = Field(
        default=0.3,
        ge=0,
        description="Quiet period before a typed search text is applied",
    )
    storage_quota_bytes: int | None = Field(
        default=5 * 1024 * 1024,
        ge=1,
        description="Maximum session store size in bytes (None disables the check)",
    )
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional log file path")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
