"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Central configuration for cv-profile-server."""

    model_config = SettingsConfigDict(env_prefix="CV_", env_file=".env", extra="ignore")

    # --- Source document ---
    pdf_path: Path = Field(
        default=Path("./files/cv.pdf"),
        description="Path to the CV document (PDF or plain text)",
    )
    max_document_size_mb: int = Field(
        default=10,
        description="Log a warning for documents larger than this (MB)",
    )
    extraction_timeout_seconds: float | None = Field(
        default=60.0,
        description="Upper bound on document decoding; None disables it",
    )

    # --- Server ---
    server_name: str = Field(
        default="cv-profile-server",
        description="Name announced to MCP clients",
    )
    server_version: str = Field(
        default="1.0.0",
        description="Version announced to MCP clients",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    @field_validator("extraction_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float | None) -> float | None:
        """Reject non-positive timeouts."""
        if value is not None and value <= 0:
            msg = f"extraction_timeout_seconds must be positive, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate the log level name."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level
