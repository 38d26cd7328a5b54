"""
Centralized configuration management using pydantic-settings.
This module provides a single source of truth for all application configuration.
"""


import os

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.utils.logger import setup_logger

load_dotenv(override=True)


logger = setup_logger("core_config")


class Settings(BaseSettings):
    """
    Application settings managed by pydantic-settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
        env_prefix="",
    )

    # ===== Database Configuration =====
    database_url: str | None = Field(
        default=None,
        alias="TWITTER_DATABASE_URL",
        description="PostgreSQL URL of the application database",
    )

    database_schema: str = Field(
        default="twitter",
        alias="TWITTER_DATABASE_SCHEMA",
        description="Database schema holding the application tables",
    )

    db_pool_size: int = Field(
        default=10, alias="DB_POOL_SIZE", description="Connection pool size"
    )

    db_max_overflow: int = Field(
        default=20,
        alias="DB_MAX_OVERFLOW",
        description="Connections allowed above the pool size",
    )

    db_pool_timeout: int = Field(
        default=30,
        alias="DB_POOL_TIMEOUT",
        description="Seconds to wait for a pooled connection",
    )

    # ===== Request Handling =====
    request_timeout_seconds: float = Field(
        default=5.0,
        alias="REQUEST_TIMEOUT_SECONDS",
        description="Time budget for a single request before it is abandoned",
    )

    default_page_limit: int = Field(
        default=10,
        alias="DEFAULT_PAGE_LIMIT",
        description="Page size used when the client sends no or a non-positive limit",
    )

    max_page_limit: int = Field(
        default=100,
        alias="MAX_PAGE_LIMIT",
        description="Upper bound for the page size of list endpoints",
    )

    # ===== Authentication =====
    secret_key: str = Field(
        default="your-secret-key-change-this-in-production",
        alias="SECRET_KEY",
        description="Key used to sign JWT access tokens",
    )

    jwt_algorithm: str = Field(
        default="HS256", alias="JWT_ALGORITHM", description="JWT signing algorithm"
    )

    access_token_expire_minutes: int = Field(
        default=1440,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
        description="Access token lifetime in minutes (24 hours default)",
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0", alias="SERVER_HOST", description="Server host address"
    )

    server_port: int = Field(
        default=8080, alias="SERVER_PORT", description="Server port number"
    )

    server_workers: int = Field(
        default=1, alias="SERVER_WORKERS", description="Number of uvicorn workers"
    )

    # ===== CORS Configuration =====
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://localhost:3000",
        ],
        alias="CORS_ALLOW_ORIGINS",
        description="CORS allowed origins",
    )

    cors_allow_credentials: bool = Field(
        default=True,
        alias="CORS_ALLOW_CREDENTIALS",
        description="Whether to allow credentials in CORS requests",
    )

    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_METHODS",
        description="CORS allowed methods",
    )

    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_HEADERS",
        description="CORS allowed headers",
    )

    # User-facing hint for database connection errors
    db_unavailable_hint: str = os.getenv(
        "DB_UNAVAILABLE_HINT",
        "Database connection failed. The server may be offline or network connectivity is down.",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Normalize the database URL and warn about missing critical values."""
        if not self.database_url:
            logger.warning("TWITTER_DATABASE_URL environment variable not set.")
        elif self.database_url.startswith("postgresql://"):
            self.database_url = self.database_url.replace(
                "postgresql://", "postgresql+asyncpg://", 1
            )

        if self.default_page_limit <= 0:
            raise ValueError("DEFAULT_PAGE_LIMIT must be positive")
        if self.max_page_limit < self.default_page_limit:
            raise ValueError("MAX_PAGE_LIMIT must not be below DEFAULT_PAGE_LIMIT")

        logger.debug(f"Using database schema: {self.database_schema}")
        return self

    @property
    def schema_name(self) -> str:
        return self.database_schema


# Global settings instance
settings = Settings()
