"""Application settings loaded from the environment and .env."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_JWT_SECRET = "change-this-to-a-secure-random-string"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Taskboard API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True
    app_url: str = "http://localhost:3000"  # frontend base for links in notifications

    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False

    # Tokens are issued elsewhere with this shared secret
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    cors_origins: list[str] = ["http://localhost:3000"]
    log_user_emails: bool = False
    metrics_api_key: str | None = None

    # Without REDIS_URL task listings are cached in process memory
    redis_url: str | None = None
    redis_pool_size: int = 10
    redis_connect_timeout_seconds: float = Field(default=1.0, gt=0)
    redis_socket_timeout_seconds: float = Field(default=1.0, gt=0)
    cache_enabled: bool = True
    task_list_cache_ttl_seconds: int = Field(default=60, gt=0)

    # Without RESEND_API_KEY emails are logged instead of sent
    resend_api_key: str | None = None
    email_from: str = "noreply@example.com"
    email_send_timeout_seconds: int = 10

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == PLACEHOLDER_JWT_SECRET:
            raise ValueError(
                "JWT_SECRET_KEY is still the placeholder. "
                "Generate one with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Credentials are allowed, so wildcard origins are refused."""
        if "*" in v:
            raise ValueError("CORS_ORIGINS cannot contain '*'; list explicit origins")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
