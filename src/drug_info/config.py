"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

from drug_info.constants import (
    DEFAULT_DATABASE_URL,
    DEFAULT_LABELS_FILE,
    FAQ_ANSWER_MAX_CHARS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = DEFAULT_DATABASE_URL

    # Seeding
    labels_path: Path = Path(DEFAULT_LABELS_FILE)
    faq_answer_max_chars: int = FAQ_ANSWER_MAX_CHARS

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
