"""Application configuration."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str = "sqlite:///./notes.db"

    # Notes
    default_note_title: str = "Some title"

    # Outbound webhooks
    webhook_timeout: float = 5.0

    # Header carrying the user id set by the upstream auth proxy
    user_id_header: str = "X-User-Id"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "app.log"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
