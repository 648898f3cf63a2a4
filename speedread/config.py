"""Application configuration settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./data/speedread.db"

    # App
    app_name: str = "Speedread"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Playback defaults
    default_wpm: float = Field(300, gt=0)
    pause_multiplier: float = Field(2.2, gt=0)
    pause_on_punctuation: bool = True
    window_radius: int = Field(1000, ge=0)

    # Limits
    max_input_chars: int = 10_000_000


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
