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
    debug: bool = True
    log_level: str = "INFO"

    # Registry
    load_sample_data: bool = True

    # Lifecycle
    return_hub_id: str = "RETURN"
    return_hub_name: str = "Returned to Sender"

    # Rendering
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
