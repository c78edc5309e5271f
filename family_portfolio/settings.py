"""
Application settings.

Values come from environment variables prefixed FAMILY_PORTFOLIO_
(e.g. FAMILY_PORTFOLIO_DATA_DIRECTORY) or a local .env file.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from family_portfolio.core.constants import DEFAULT_CACHE_SIZE, DEFAULT_CACHE_TTL_SECONDS


class Settings(BaseSettings):
    app_env: str = "dev"

    # Snapshot data exported by the sync jobs
    data_directory: str = "data"
    cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, ge=0)
    cache_size: int = Field(default=DEFAULT_CACHE_SIZE, gt=0)

    log_level: str = "INFO"

    # Development frontend origins
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Unrelated keys in a shared .env are ignored
    model_config = SettingsConfigDict(
        env_prefix="FAMILY_PORTFOLIO_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is one loguru knows."""
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
