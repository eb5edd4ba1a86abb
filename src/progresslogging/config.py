"""progresslogging configuration management."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """progresslogging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROGRESSLOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging channel
    logger_name: str = Field(
        default="progresslogging",
        description="Logger that receives progress records when no logger is given",
    )
    progress_level: int = Field(
        default=logging.INFO - 1,
        description="Severity of progress records (below INFO so it is off by default)",
    )
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Loop throttling
    threshold: float = Field(
        default=0.005,
        description="Minimum fraction gained between two loop updates",
    )

    # Validators
    @field_validator("progress_level")
    @classmethod
    def validate_progress_level(cls, v: int) -> int:
        """Progress must sit strictly between NOTSET and INFO."""
        if not logging.NOTSET < v < logging.INFO:
            raise ValueError(
                f"progress_level must be between {logging.NOTSET} and {logging.INFO} (exclusive), got {v}"
            )
        return v

    @field_validator("threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError(f"threshold must be in [0, 1), got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names plus PROGRESS."""
        name = v.upper()
        if name != "PROGRESS" and not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v}")
        return name


settings = Settings()
