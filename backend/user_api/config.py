"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Runtime
    environment: str = "production"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "user-apis"
    mongo_server_selection_timeout_ms: int = 5000

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379

    # JWT Configuration
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 24 * 60

    # Rate Limiting
    rate_limit_enabled: bool = True
    login_rate_limit_attempts: int = 5
    register_rate_limit_attempts: int = 10
    rate_limit_window_seconds: int = 60

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
