"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "HR Pulse"
    app_version: str = "1.0.0"
    debug: bool = False

    # Which collaborator implementations get wired in
    store_backend: Literal["memory", "snowflake"] = "memory"

    # Snowflake
    snowflake_account: str = ""
    snowflake_user: str = ""
    snowflake_password: str = ""
    snowflake_database: str = "HR_PULSE"
    snowflake_schema: str = "PUBLIC"
    snowflake_warehouse: str = "COMPUTE_WH"

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    question_cache_enabled: bool = False

    # Cache TTLs (seconds)
    cache_ttl_questions: int = 3600  # 1 hour

    # Admin log view
    log_buffer_max_lines: int = 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
