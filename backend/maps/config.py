"""
Configuration for the maps service.
Uses pydantic-settings for environment variable handling.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="MAPS_", case_sensitive=False, extra="ignore"
    )

    api_title: str = "Maps API"
    api_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 9191


settings = Settings()
