"""
Client configuration loaded from environment variables.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Client settings from environment variables."""

    # Polishing backend
    api_base_url: str = "http://127.0.0.1:5000"

    # Language sent with every polish/refine request
    language: str = "en"

    # Logging
    log_level: str = "INFO"

    # Debug mode (forces DEBUG logging)
    debug: bool = False

    class Config:
        env_prefix = "MAIL_POLISHER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
