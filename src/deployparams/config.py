"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from deployparams.constants import DEFAULT_PARAMETERS_FILE_SUFFIX

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    debug_mode: bool = False

    # Reconciliation
    # Raise instead of silently dropping an optional parameter
    # whose compiled default is missing.
    strict_compiled_defaults: bool = False
    parameters_file_suffix: str = DEFAULT_PARAMETERS_FILE_SUFFIX

    # Source files
    source_encoding: str = "utf-8"

    # MCP server (SSE transport)
    mcp_host: str = "127.0.0.1"
    mcp_port: int = 8001

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        if v not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}"
            )
        return v

    @field_validator("parameters_file_suffix")
    @classmethod
    def _validate_suffix(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(
                "parameters_file_suffix must start with '.'"
            )
        if not v.endswith(".json"):
            logger.warning(
                "Parameters file suffix %r does not end in .json", v
            )
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
