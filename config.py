"""Configuration management for the link registry."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    # Short link settings
    base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL for generating short links"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short links (e.g., '/s' for /s/abc12345)"
    )

    short_code_length: int = Field(
        default=8,
        ge=4,
        le=22,
        description="Length of generated short ids"
    )

    id_strategy: Literal["uuid", "random"] = Field(
        default="uuid",
        description="Short id generation strategy"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=1,
        description="Maximum attempts when a generated short id collides"
    )

    trust_forwarded_for: bool = Field(
        default=False,
        description="Record the first X-Forwarded-For hop as the client address"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
