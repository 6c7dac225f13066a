"""Configuration management for TinyApp."""

import secrets
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
        default=8080,
        description="Port to listen on"
    )
    
    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. Registries are per-process, so keep 1 unless state sharing is not needed."
    )
    
    # Link settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Fallback base URL for displaying short URLs"
    )
    
    path_prefix: str = Field(
        default="",
        description="Path prefix the app is served under (e.g., '/tiny' for /tiny/u/abc123)"
    )
    
    short_id_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated short ids and account ids"
    )
    
    max_collision_retries: int = Field(
        default=10,
        ge=0,
        description="Extra attempts when a generated id is already taken"
    )
    
    seed_demo_data: bool = Field(
        default=False,
        description="Create a demo account with sample links at startup"
    )
    
    # Session settings
    session_secret_key: str = Field(
        default_factory=lambda: secrets.token_urlsafe(32),
        description="Key used to sign session cookies (random per process if unset)"
    )
    
    session_cookie: str = Field(
        default="session",
        description="Session cookie name"
    )
    
    session_max_age: int = Field(
        default=86400,
        ge=1,
        description="Session lifetime in seconds"
    )
    
    session_https_only: bool = Field(
        default=False,
        description="Only send the session cookie over HTTPS"
    )
    
    # Password settings
    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt cost factor"
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
    
    def safe_dump(self) -> dict:
        """Configuration for logging, with secrets masked."""
        data = self.model_dump()
        data["session_secret_key"] = "***"
        return data


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
