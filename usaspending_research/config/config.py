"""Configuration management for the USAspending research server."""

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration from ``USASPENDING_*`` environment variables."""

    base_url: str = "https://api.usaspending.gov/api/v2"

    # Fetch client. The API is slow on broad queries, hence the long timeout.
    timeout_seconds: float = Field(90.0, gt=0)
    max_retries: int = Field(2, ge=0)
    retry_delay_ms: int = Field(1000, ge=0)
    request_delay_ms: int = Field(100, ge=0)

    # Server
    server_name: str = "usaspending-research"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"
    port: int = Field(8000, gt=0, lt=65536)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="USASPENDING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def retry_delay(self) -> float:
        """Retry backoff base in seconds."""
        return self.retry_delay_ms / 1000

    @property
    def request_delay(self) -> float:
        """Minimum spacing between outbound requests in seconds."""
        return self.request_delay_ms / 1000


def validate_config() -> Settings:
    """Load and validate configuration from environment.

    Raises ValueError naming ALL invalid variables (not just the first one).
    """
    try:
        return Settings()
    except ValidationError as exc:
        invalid = sorted(
            {f"USASPENDING_{str(err['loc'][0]).upper()}" for err in exc.errors() if err["loc"]}
        )
        names = ", ".join(invalid) or "unknown"
        raise ValueError(
            f"Invalid environment variable(s): {names}. "
            "Please fix them in your .env file or environment."
        ) from exc


def load_config() -> Settings:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
