"""
Configuration management for the IndustryJobs job board.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Database
    database_url: str = ""

    # Auth
    session_ttl_hours: int = 24
    password_reset_ttl_minutes: int = 60
    password_reset_redirect: str = "http://localhost:5173"
    auth_rate_limit: str = "10/minute"

    # API
    cors_origins: str = "http://localhost:5173"

    # In-memory app contexts (one per signed-in session token)
    context_cache_size: int = 500
    context_cache_ttl: float = 3600.0

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
