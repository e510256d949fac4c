"""Application settings and configuration."""

import logging

from limits import parse_many
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Input Validation API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str  # development, staging, production

    # PostgreSQL
    postgres_url: str
    postgres_pool_size: int = 10
    postgres_max_overflow: int = 20
    postgres_pool_timeout: int = 30
    postgres_pool_recycle: int = 3600
    postgres_echo: bool = False

    # API
    api_prefix: str = "/api"

    # CORS
    cors_allow_origins: str | None = None
    cors_allow_credentials: bool = False

    # Rate limiting (slowapi limit strings, e.g. "100/minute;1000/hour")
    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/minute"

    # Rules store
    seed_validation_rules: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json, text

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against the standard logging level names."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        fmt = str(v).lower()
        if fmt not in {"json", "text"}:
            raise ValueError(f"Log format must be 'json' or 'text', got {fmt}")
        return fmt

    @field_validator("rate_limit_default")
    @classmethod
    def validate_rate_limit(cls, v: str) -> str:
        """Ensure the rate limit string can be parsed by slowapi."""
        try:
            parse_many(v)
        except ValueError as exc:
            raise ValueError(f"Invalid rate limit: {v}") from exc
        return v

    @model_validator(mode="after")
    def check_cors_origins(self) -> "Settings":
        """Reject wildcard CORS origins in production."""
        if self.environment == "production" and "*" in self.cors_origins:
            raise ValueError("Wildcard CORS origin is not allowed in production")
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins, stripping trailing slashes."""
        if not self.cors_allow_origins:
            return []
        return [origin.strip().rstrip("/") for origin in self.cors_allow_origins.split(",") if origin.strip()]


settings = Settings()  # type: ignore[call-arg]
