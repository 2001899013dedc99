"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.

Loading never fails: empty variables are treated as unset, and numeric
values that cannot be parsed (or are not positive) fall back to defaults.
"""

import tempfile
from datetime import timedelta
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="yt-sampler", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # API Service
    server_host: str = Field(default="localhost", alias="SERVER_HOST")
    server_port: int = Field(default=8080, gt=0, alias="SERVER_PORT")
    max_file_size: int = Field(
        default=50 * 1024 * 1024, gt=0, alias="MAX_FILE_SIZE"
    )  # bytes

    # Storage (per-request workspaces are created below this directory)
    temp_dir: str = Field(default_factory=tempfile.gettempdir, alias="TEMP_DIR")

    # Downstream audio processing service
    audio_service_url: str = Field(
        default="http://localhost:8081",
        validation_alias=AliasChoices("AUDIO_SERVICE_URL", "RUST_SERVICE_URL"),
    )
    audio_service_process_path: str = Field(
        default="/process", alias="AUDIO_SERVICE_PROCESS_PATH"
    )
    audio_service_health_path: str = Field(
        default="/api/v1/health", alias="AUDIO_SERVICE_HEALTH_PATH"
    )
    http_timeout_seconds: int = Field(default=30, gt=0, alias="HTTP_TIMEOUT_SECONDS")

    # External downloader
    downloader_executable: str = Field(default="yt-dlp", alias="DOWNLOADER_EXECUTABLE")
    # 140 = m4a audio-only stream
    downloader_format: str = Field(default="140", alias="DOWNLOADER_FORMAT")
    download_timeout_seconds: int = Field(
        default=300, gt=0, alias="DOWNLOAD_TIMEOUT_SECONDS"
    )

    # Admission control for download + relay pipelines
    max_concurrent_jobs: int = Field(default=4, gt=0, alias="MAX_CONCURRENT_JOBS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Log format: "console" (colored, human-readable) or "json" (for log aggregation)
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    # Enable/disable file logging (logs/app.log and logs/error.log)
    log_file_enabled: bool = Field(default=False, alias="LOG_FILE_ENABLED")

    @field_validator(
        "server_port",
        "max_file_size",
        "http_timeout_seconds",
        "download_timeout_seconds",
        "max_concurrent_jobs",
        "debug",
        "log_file_enabled",
        mode="wrap",
    )
    @classmethod
    def fallback_to_default(cls, value: Any, handler, info) -> Any:
        """Malformed values fall back to the field default instead of failing."""
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].default

    @property
    def http_timeout(self) -> timedelta:
        """HTTP client timeout as a duration."""
        return timedelta(seconds=self.http_timeout_seconds)

    @property
    def process_url(self) -> str:
        """Full URL of the downstream processing endpoint."""
        return _join_url(self.audio_service_url, self.audio_service_process_path)

    @property
    def health_url(self) -> str:
        """Full URL of the downstream health endpoint."""
        return _join_url(self.audio_service_url, self.audio_service_health_path)


def _join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
