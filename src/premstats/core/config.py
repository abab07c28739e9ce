"""
Configuration management for the PremStats API.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables.
"""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    For nested settings, use double underscore: CORS__ALLOW_ORIGINS="http://localhost:3000"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "PremStats API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = Field(default="INFO", description="Root log level for CLI and API")

    # ==========================================================================
    # Database Configuration
    # ==========================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection string",
    )
    database_pool_size: int = Field(default=10, ge=1, le=50)
    database_pool_timeout: int = Field(default=30, ge=5, le=120)

    @computed_field
    @property
    def db_url(self) -> str:
        """Get the effective database URL."""
        return self.database_url or os.environ.get("DATABASE_URL", "")

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_prefix: str = "/api/v1"
    api_docs_url: str = "/docs"
    api_redoc_url: str = "/redoc"

    # ==========================================================================
    # CORS Configuration
    # ==========================================================================
    cors_allow_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Allowed CORS origins. Set to ['*'] for development.",
    )
    cors_allow_methods: list[str] = ["GET", "HEAD", "OPTIONS"]
    cors_allow_headers: list[str] = ["Accept", "Accept-Encoding", "Content-Type", "Cache-Control"]
    cors_allow_credentials: bool = False
    cors_expose_headers: list[str] = ["X-Process-Time"]

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Get CORS origins, adding production URLs if in production."""
        origins = list(self.cors_allow_origins)

        if self.environment == "production":
            prod_origins = os.getenv("CORS_PRODUCTION_ORIGINS", "")
            if prod_origins:
                origins.extend(prod_origins.split(","))

        return origins

    # ==========================================================================
    # Reports
    # ==========================================================================
    activity_window_days: int = Field(
        default=7,
        ge=1,
        description="How far back the completeness report looks for import activity",
    )
    activity_limit: int = Field(default=20, ge=1, le=200)
    report_ranking_size: int = Field(
        default=5,
        ge=1,
        description="Number of best/worst seasons listed in the completeness report",
    )
    top_scorers_limit: int = Field(default=20, ge=1, le=100)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
