import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration backed by Pydantic BaseSettings.
    Values are loaded from the environment and an optional .env file.
    """

    # API Configuration
    PROJECT_NAME: str = "Storefront API"
    PROJECT_DESCRIPTION: str = "Catalog, cart and ordering backend exposed over GraphQL"
    VERSION: str = "0.1.0"
    GRAPHQL_PATH: str = Field("/graphql", description="Mount path of the GraphQL endpoint")
    GRAPHQL_IDE: bool = Field(True, description="Serve the GraphiQL IDE on GET requests")
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(default=["*"], description="Allowed CORS origins")

    # PostgreSQL Database Settings
    DATABASE_URL: str | None = Field(None, description="Full connection URL, overrides the DB_* fields")
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("storefront", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")
    DB_CREATE_TABLES: bool = Field(True, description="Create missing tables during startup")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Authentication
    JWT_SECRET_KEY: str = Field(..., description="Secret used to sign access tokens")
    JWT_ALGORITHM: str = Field("HS256", description="Access token signing algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24, description="Access token lifetime in minutes")
    BCRYPT_ROUNDS: int = Field(12, description="bcrypt work factor for password digests")

    # Text generation (OpenAI-compatible endpoint, OpenRouter by default)
    TEXT_GENERATION_API_KEY: str | None = Field(None, description="API key for the text generation provider")
    TEXT_GENERATION_BASE_URL: str = Field(
        "https://openrouter.ai/api/v1", description="Base URL of the OpenAI-compatible API"
    )
    TEXT_GENERATION_MODEL: str = Field("qwen/qwen3-coder:free", description="Model identifier")
    TEXT_GENERATION_TEMPERATURE: float = Field(0.7, description="Sampling temperature")
    TEXT_GENERATION_TIMEOUT: int = Field(60, description="Request timeout in seconds")
    TEXT_GENERATION_MAX_RETRIES: int = Field(2, description="Retries performed by the client")
    TEXT_GENERATION_REFERER: str = Field("http://localhost:8080", description="HTTP-Referer sent to OpenRouter")
    TEXT_GENERATION_APP_TITLE: str = Field("Storefront", description="X-Title sent to OpenRouter")

    # Orders
    ORDER_STRICT_TRANSITIONS: bool = Field(
        False, description="Reject order status changes outside the transition table"
    )
    DEFAULT_SHIPPING_COUNTRY: str = Field("Saudi Arabia", description="Country used when none is supplied")

    # Environment / observability
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("development", description="Execution environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Log format: colored, json or plain")
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN, error reporting is disabled when empty")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Accept a JSON list or a comma separated string."""
        if isinstance(value, str):
            if value.strip().startswith("["):
                return json.loads(value)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v):
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
