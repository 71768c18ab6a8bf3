"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="OTUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Server
    host: str = Field(default="0.0.0.0", description="HTTP bind address")
    port: int = Field(default=8080, gt=0, lt=65536, description="HTTP port")
    reload: bool = Field(default=False, description="Hot reload for development")
    service_name: str = Field(default="otui-service", description="Service name for traces")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Tracing
    enable_tracing: bool = Field(default=True, description="Log spans for requests")

    # Validation
    max_source_length: int = Field(
        default=1024 * 1024, gt=0, description="Max OTUI source length (characters)"
    )
    max_tree_depth: int = Field(default=64, gt=0, description="Max widget nesting on export")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
