"""Runtime configuration — env-driven.

Centralized config using pydantic-settings.  Reads from a .env file and
STREAMFAN_* environment variables.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from streamfan.core.copying import DEFAULT_CHUNK_SIZE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StreamConfig(BaseSettings):
    """Streamfan configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export STREAMFAN_CHUNK_SIZE=65536
        export STREAMFAN_LOG_LEVEL=DEBUG
        export STREAMFAN_APPEND=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STREAMFAN_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Copy tuning
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    # CLI defaults
    append: bool = False

    # Observability
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


# Module-level singleton — import as `from streamfan.config import config`
config = StreamConfig()
