"""Configuration management for URL shortener."""

from typing import Optional
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
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL for short links when the request carries no host"
    )

    shutdown_timeout: int = Field(
        default=10,
        ge=0,
        description="Seconds to wait for in-flight requests and visit registrations on shutdown"
    )

    # URL shortener settings
    short_id_length: int = Field(
        default=4,
        ge=1,
        description="Length of generated short ids"
    )

    max_id_tries: int = Field(
        default=5,
        ge=1,
        description="Maximum attempts when a generated id collides"
    )

    # Logging settings
    dev_log: bool = Field(
        default=False,
        description="Human-readable logs instead of JSON lines"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config(**overrides) -> Config:
    """Load configuration from environment.

    Keyword arguments whose value is not None take precedence over the
    environment.
    """
    return Config(**{k: v for k, v in overrides.items() if v is not None})
