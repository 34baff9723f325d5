"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Which resource family this process serves
    service: Literal["rental", "catalog"] = "rental"

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("mongo_uri", "mongodb_connection_string"),
    )
    database_name: Optional[str] = None
    mongo_server_selection_timeout_ms: int = 5000

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    static_dir: str = "public"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
