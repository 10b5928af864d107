"""
Configuration management for the vehicles service.
Uses pydantic-settings for environment variable handling.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="VEHICLES_", case_sensitive=False, extra="ignore"
    )

    # API Configuration
    api_title: str = "Vehicles API"
    api_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Storage
    database_path: str = "data/vehicles.db"  # relative to backend/

    # Downstream services
    pricing_url: str = "http://localhost:8082"
    maps_url: str = "http://localhost:9191"
    request_timeout: float = 5.0  # seconds, same as the httpx default


# Global settings instance
settings = Settings()
