"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import SpeedConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Playlist Duration Calculator"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # YouTube Data API v3
    YOUTUBE_API_KEY: str = ""
    YOUTUBE_API_BASE_URL: str = "https://www.googleapis.com/youtube/v3"
    YOUTUBE_HTTP_TIMEOUT: float = 10.0

    # Playback speeds reported next to the 1x total
    SPEED_MULTIPLIERS: List[float] = [1.25, 1.5, 1.75, 2.0]

    @field_validator("SPEED_MULTIPLIERS")
    @classmethod
    def validate_speed_multipliers(cls, v: List[float]) -> List[float]:
        if any(not SpeedConfig.MIN_MULTIPLIER <= m <= SpeedConfig.MAX_MULTIPLIER for m in v):
            raise ValueError(
                f"Speed multipliers must be between {SpeedConfig.MIN_MULTIPLIER} "
                f"and {SpeedConfig.MAX_MULTIPLIER}"
            )
        return v

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
