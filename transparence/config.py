"""
Configuration management for Transparence Politique.

Supports multiple environments (local, development, production) with
different database and press-analysis settings.

Responsibility: Centralized configuration and environment management
"""

from enum import Enum
from typing import Optional, List
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment"""
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class DatabaseConfig(BaseSettings):
    """Database configuration"""

    # Connection settings - prioritize DATABASE_URL env var
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    driver: str = Field(default="postgresql+asyncpg")
    host: Optional[str] = Field(default="localhost")
    port: Optional[int] = Field(default=5432)
    database: str = Field(default="transparence")
    username: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)

    # Connection pool settings
    pool_size: int = Field(default=5)
    max_overflow: int = Field(default=10)
    pool_timeout: int = Field(default=30)
    pool_recycle: int = Field(default=3600)

    echo: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    def _build_url(self, driver: str) -> str:
        auth = ""
        if self.username:
            auth = self.username
            if self.password:
                auth = f"{auth}:{self.password}"
            auth = f"{auth}@"

        host_port = self.host or "localhost"
        if self.port:
            host_port = f"{host_port}:{self.port}"

        return f"{driver}://{auth}{host_port}/{self.database}"

    @property
    def connection_string(self) -> str:
        """
        Build async database connection string.

        Returns:
            SQLAlchemy connection string
        """
        if self.database_url:
            url = self.database_url
            # Hosted providers hand out plain postgresql:// URLs
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql://", 1)
            if "postgresql" in url and "+asyncpg" not in url and "+psycopg" not in url:
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        return self._build_url(self.driver)

    @property
    def sync_connection_string(self) -> str:
        """
        Build synchronous database connection string for Alembic migrations.

        Returns:
            SQLAlchemy sync connection string (without async drivers)
        """
        if self.database_url:
            url = self.database_url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql://", 1)
            if "+asyncpg" in url:
                url = url.replace("+asyncpg", "+psycopg")
            elif "postgresql://" in url and "+psycopg" not in url:
                url = url.replace("postgresql://", "postgresql+psycopg://", 1)
            return url

        return self._build_url(self.driver.replace("+asyncpg", "+psycopg"))


class PressConfig(BaseSettings):
    """Press analysis configuration"""

    # Analysis model per tier
    high_precision_model: str = Field(default="claude-sonnet")
    low_precision_model: str = Field(default="claude-haiku")

    # Batch size for the classification script
    batch_size: int = Field(default=200)

    model_config = SettingsConfigDict(
        env_prefix="PRESS_",
        case_sensitive=False,
        extra="ignore"
    )


class AppConfig(BaseSettings):
    """Application configuration"""

    # Environment
    environment: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=False)

    # Application metadata
    app_name: str = Field(default="Transparence Politique")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")

    # API settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # Admin back-office access
    admin_api_key: Optional[str] = Field(
        default=None,
        description="Shared secret expected in the X-Admin-Key header"
    )
    require_admin_key: bool = Field(
        default=True,
        description="Require X-Admin-Key authentication for admin routes"
    )

    # CORS settings
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins (JSON list or comma-separated in env)"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from JSON string or comma-separated list"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            v = v.strip()
            if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
                v = v[1:-1]
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Settings(BaseSettings):
    """
    Global settings container.

    Loads configuration from:
    1. Environment variables
    2. .env file
    3. Default values

    Example:
        settings = Settings()
        settings.db.connection_string
        settings.press.high_precision_model
    """

    app: AppConfig = Field(default_factory=AppConfig)
    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    press: PressConfig = Field(default_factory=PressConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @classmethod
    def for_production(cls) -> "Settings":
        """
        Create settings for production.

        Requires environment variables:
        - DATABASE_URL or DB_HOST, DB_PORT, DB_DATABASE, DB_USERNAME, DB_PASSWORD
        - APP_ADMIN_API_KEY
        """
        return cls(
            app=AppConfig(
                environment=Environment.PRODUCTION,
                debug=False,
                log_level="INFO"
            ),
            db=DatabaseConfig(driver="postgresql+asyncpg"),
            press=PressConfig(),
        )


# Global settings instance
settings = Settings()
