"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings sourced from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # PORT="" falls back to the default instead of failing int parsing
        env_ignore_empty=True,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Application (app_version labels the OpenAPI document only)
    app_name: str = "Game Note Backend"
    app_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()
