"""Configuration management for memdb."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExecutionConfig(BaseModel):
    """Statement execution configuration."""

    execution_delay: float = Field(
        default=0.0, ge=0.0, description="Simulated latency per statement in seconds"
    )
    max_workers: int = Field(
        default=1, ge=1, le=64, description="Worker threads running statements"
    )
    serialize_mutations: bool = Field(
        default=False, description="Guard every table operation with one global lock"
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="REST API port")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="memdb", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for memdb."""

    model_config = SettingsConfigDict(
        env_prefix="MEMDB_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
