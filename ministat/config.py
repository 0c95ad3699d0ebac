"""Configuration management for ministat.

Uses pydantic-settings so defaults can come from ``MINISTAT_*`` environment
variables or a ``.env`` file. Command-line flags take precedence.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="MINISTAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Plot
    width: int | None = Field(
        default=None,
        ge=3,
        description="Fixed plot width; overrides terminal detection",
    )
    default_width: int = Field(
        default=74,
        ge=3,
        description="Plot width when the terminal width cannot be detected",
    )
    modern_chars: bool = Field(
        default=False,
        description="Use Unicode glyphs and box drawing by default",
    )

    # Analysis
    confidence: str = Field(
        default="95",
        description="Default confidence level for Welch's t-test",
    )
    delimiter: str = Field(
        default=" \t",
        description="Default column delimiter characters",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
