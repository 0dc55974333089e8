"""Configuration settings for the Tour Manager API client."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

BASE_URL = "https://api.tours.rezkit.app"


class Settings(BaseSettings):
    """Client settings with Pydantic validation.

    Values are read from ``RK_``-prefixed environment variables (or a ``.env``
    file) unless passed explicitly, e.g. ``RK_API_KEY`` and ``RK_API_URL``.
    """

    # API settings
    api_url: str = Field(
        default=BASE_URL,
        description="Base URL of the Tour Manager API"
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Static API key sent as a bearer token"
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds"
    )

    # Environment settings
    environment: str = Field(
        default="development",
        description="Client environment"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Client log level"
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be joined with a single slash."""
        return v.rstrip("/")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_environments = ["development", "staging", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @property
    def debug(self) -> bool:
        """Return True if in development mode."""
        return self.environment == "development"

    model_config = {
        "env_prefix": "RK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
