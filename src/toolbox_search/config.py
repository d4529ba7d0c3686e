"""Centralized configuration for toolbox-search using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``TOOLBOX_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLBOX_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", description="Root logging level"
    )
    log_json: bool = Field(default=True, description="Emit structured JSON logs instead of plain text")

    # Block definitions
    include_builtin_blocks: bool = Field(
        default=True, description="Preload stock block definitions into the registry"
    )
    block_definitions_file: Path | None = Field(
        default=None, description="JSON file holding an array of extra block definitions"
    )

    # Tracing
    trace_enabled: bool = Field(default=False, description="Install an OpenTelemetry SDK tracer provider")
    service_name: str = Field(default="toolbox-search", min_length=1, description="Service name for traces")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("block_definitions_file", mode="before")
    @classmethod
    def _blank_path_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value
