"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Postgres: required, the service cannot start without it
    DATABASE_URL: str
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT_SEC: float = 30.0

    # JWT signing secret: required, the service cannot start without it
    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = "HS256"

    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL (e.g. postgresql:// or postgresql+psycopg2://)"
            )
        return v.strip()

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v: int) -> int:
        if v < 1 or v > 100:
            raise ValueError("DB_POOL_SIZE must be between 1 and 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v: int) -> int:
        if v < 0 or v > 100:
            raise ValueError("DB_MAX_OVERFLOW must be between 0 and 100")
        return v

    @field_validator("DB_POOL_TIMEOUT_SEC")
    @classmethod
    def validate_pool_timeout(cls, v: float) -> float:
        if v <= 0 or v > 300:
            raise ValueError("DB_POOL_TIMEOUT_SEC must be greater than 0 and at most 300")
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        v = v.strip() if v else v
        if not v:
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        if not v.startswith("HS"):
            raise ValueError("JWT_ALGORITHM must be a symmetric HMAC algorithm (HS256, HS384, HS512)")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance; raises if required values are missing."""
    return Settings()
