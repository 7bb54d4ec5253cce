"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # User store
    users_file: str = "users.json"

    # Control panel gate, compared per request
    admin_password: str = "CHANGE_ME_BEFORE_DEPLOYING"

    # Password hashing work factor
    bcrypt_rounds: int = 12

    # Logging
    log_level: str = "INFO"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = [
        "http://localhost:8501",  # Streamlit default
        "http://localhost:3000",  # Development
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
