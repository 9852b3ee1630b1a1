"""Base configuration models for the application."""
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)
    format: str = Field(default=DEFAULT_LOG_FORMAT)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("level")
    def level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure root logging for an application embedding llmrelay."""
    config = config or LoggingConfig()
    logging.basicConfig(level=config.level, format=config.format, filename=config.file, force=True)
