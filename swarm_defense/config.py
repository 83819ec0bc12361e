"""
Configuration management for Swarm Defense.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    # Game clock
    tick_rate_ms: int = Field(
        default=16,
        gt=0,
        description="Tick interval in milliseconds (about 60 Hz)"
    )

    # Viewport
    viewport_width: int = Field(default=800, gt=0)
    viewport_height: int = Field(default=600, gt=0)

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for alien types and fire. None means a fresh seed each run"
    )

    # Display
    window_title: str = Field(default="Swarm Defense")
    show_fps: bool = Field(
        default=False,
        description="Draw measured tick rate in the HUD"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    class Config:
        env_prefix = "SWARM_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
