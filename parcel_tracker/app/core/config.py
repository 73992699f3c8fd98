"""
Configuration settings for the Parcel Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Parcel Tracker"
    api_version: str = "v1"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Registry policy
    allow_duplicate_ids: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
