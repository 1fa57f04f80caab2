"""
Configuration settings using Pydantic Settings.
"""

from pathlib import Path
from pydantic import model_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

import os

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    BACKBOARD_API_KEY: str = os.environ.get("BACKBOARD_API_KEY") or ""

    LLM_PROVIDER: str = "google"
    MODEL_NAME: str = "gemini-2.5-flash"

    DATABASE_PATH: str = "data/mindscape.db"
    NOTES_STORAGE_KEY: str = "mindscape_posts"

    # Excerpt length used as the default summary, and the content length a
    # summaryless note must exceed before a generated summary is requested.
    SUMMARY_EXCERPT_CHARS: int = 150
    SUMMARY_MIN_CONTENT_CHARS: int = 50

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    DEBUG: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @model_validator(mode="after")
    def resolve_relative_paths(self):
        db_path = Path(self.DATABASE_PATH)
        if not db_path.is_absolute():
            self.DATABASE_PATH = str((BASE_DIR / db_path).resolve())

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: Cached Settings instance
    :rtype: Settings
    """
    return Settings()


settings = get_settings()
