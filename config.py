"""
Medal Watch - Configuration
"""
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class ConfigurationError(Exception):
    """Raised when settings are invalid. Fatal at startup."""
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Feed
    FEED_URL: str = Field(default="", description="Results feed URL (page data JSON)")
    FEED_FILE: Optional[Path] = Field(default=None, description="Read the feed from a local JSON file instead")
    
    # Leaderboard
    TOP_N: int = Field(default=5, gt=0)
    POLL_INTERVAL_SECONDS: float = Field(default=2.0, gt=0)
    
    # Crawler
    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    CRAWLERS_ENABLE_SSL: bool = Field(default=True, description="Enable SSL verification for crawlers")
    
    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[Path] = Field(default=None, description="Enables file logging when set")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment plus explicit overrides.
    
    Overrides whose value is None are ignored so CLI flags that were not
    given fall back to the environment.
    
    Raises:
        ConfigurationError: If any value is invalid, or not exactly one of
            FEED_URL and FEED_FILE is set
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
    
    if not settings.FEED_URL and settings.FEED_FILE is None:
        raise ConfigurationError("Either FEED_URL or FEED_FILE must be set")
    if settings.FEED_URL and settings.FEED_FILE is not None:
        raise ConfigurationError(
            f"FEED_URL and FEED_FILE are both set ({settings.FEED_URL!r}, {settings.FEED_FILE}); set only one"
        )
    
    return settings
