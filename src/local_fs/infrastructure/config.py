"""Configuration management for the local filesystem layer."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IOConfig(BaseModel):
    """Filesystem I/O behaviour."""

    sync_mode: Literal["fsync", "none"] = Field(
        default="none", description="Whether write() fsyncs before returning"
    )
    copy_permissions: bool = Field(
        default=True, description="Copy permission bits along with file contents"
    )
    sort_listings: bool = Field(
        default=True, description="Return directory listings sorted by name"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="local_fs", description="Service name for tracing")
    metrics_enabled: bool = Field(default=False, description="Expose Prometheus metrics")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the local filesystem layer."""

    model_config = SettingsConfigDict(
        env_prefix="LOCAL_FS_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    io: IOConfig = Field(default_factory=IOConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
