"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from travel_records.constants import MEDIA_STAGING_PREFIX


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Database =====
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    DATABASE_HOST: str = os.getenv("DATABASE_HOST", "localhost")
    DATABASE_PORT: int = int(os.getenv("DATABASE_PORT", "3306"))
    DATABASE_USER: str = os.getenv("DATABASE_USER", "root")
    DATABASE_PASSWORD: str = os.getenv("DATABASE_PASSWORD", "")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "travel_records")
    # False keeps everything in memory (tests/dev)
    USE_DB_REPOS: bool = os.getenv("USE_DB_REPOS", "false").lower() == "true"

    # ===== Blob Storage =====
    BLOB_BACKEND: str = os.getenv("BLOB_BACKEND", "memory")  # "gcs" or "memory"
    GCS_BUCKET_NAME: str = os.getenv("GCS_BUCKET_NAME", "travel-records-images")
    GCS_PROJECT_ID: Optional[str] = os.getenv("GCS_PROJECT_ID") or None
    GCS_BASE_URL: str = os.getenv("GCS_BASE_URL", "https://storage.googleapis.com")

    # ===== Media Staging =====
    MEDIA_STAGING_DIR: str = os.getenv("MEDIA_STAGING_DIR", "media_staging")
    MEDIA_STAGING_PATTERN: str = os.getenv("MEDIA_STAGING_PATTERN", f"{MEDIA_STAGING_PREFIX}*")
    STAGING_SWEEP_INTERVAL_SECONDS: int = int(os.getenv("STAGING_SWEEP_INTERVAL_SECONDS", "3600"))
    SWEEP_STAGING_ON_STARTUP: bool = os.getenv("SWEEP_STAGING_ON_STARTUP", "true").lower() == "true"

    # ===== Celery =====
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")

    # ===== HTTP =====
    CORS_ORIGINS: List[str] = ["https://localhost:7263", "https://localhost:3000"]

    # ===== Logging & Debug =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"

    def get_database_url(self) -> str:
        """Get the SQLAlchemy database URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
