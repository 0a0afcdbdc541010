"""Configuration for textschema.

Settings are read from the environment with the ``TEXTSCHEMA_`` prefix, e.g.
``TEXTSCHEMA_SKIP_BLANK_LINES=false``.
"""

from functools import lru_cache

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TextSchemaConfig(BaseSettings):
    """Settings for loading schema files."""

    skip_blank_lines: bool = Field(
        default=True,
        description="Ignore blank lines in schema files instead of rejecting them",
    )
    encoding: str = Field(default="utf-8", description="Encoding of schema files")
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    model_config = SettingsConfigDict(
        env_prefix="TEXTSCHEMA_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is known to loguru."""
        level = v.upper()
        try:
            logger.level(level)
        except ValueError as e:
            raise ValueError(f"Unknown log level: {v}") from e
        return level


@lru_cache
def get_config() -> TextSchemaConfig:
    """Return the process-wide configuration, loaded on first use."""
    return TextSchemaConfig()
