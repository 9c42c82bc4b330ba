# ==============================================================================
# SETTINGS CONFIGURATION - Environment Management
# ==============================================================================
# Pydantic Settings for type-safe environment variable management
# Built once at startup and handed to every component that needs it
# ==============================================================================

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class StorageBackend(str, Enum):
    """
    Image hosting backends.

    Attributes:
        S3: Amazon S3 (or any S3-compatible endpoint such as MinIO)
        DISABLED: No remote hosting, deletions are only logged
    """
    S3 = "s3"
    DISABLED = "disabled"


class Settings(BaseSettings):
    """
    Application Settings Configuration.

    Manages all environment variables with type validation and defaults.
    Instances are frozen: build one at startup (``get_settings()`` or
    an explicit ``Settings(...)``) and pass it to ``create_app``.

    Attributes:
        APP_NAME: Application display name
        APP_VERSION: Semantic version string
        DEBUG: Enable debug mode (never in production)
        ENVIRONMENT: Current deployment environment

    Example:
        >>> from artverse.core.settings import get_settings
        >>> print(get_settings().APP_NAME)
        'ArtVerse Marketplace'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # --------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # --------------------------------------------------------------------------
    APP_NAME: str = Field(
        default="ArtVerse Marketplace",
        description="Application display name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application semantic version"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (logs, error details)"
    )
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current deployment environment"
    )

    # --------------------------------------------------------------------------
    # API CONFIGURATION
    # --------------------------------------------------------------------------
    API_V1_PREFIX: str = Field(
        default="/api/v1",
        description="API version 1 route prefix"
    )
    API_TITLE: str = Field(
        default="ArtVerse Marketplace API",
        description="OpenAPI documentation title"
    )
    API_DESCRIPTION: str = Field(
        default="Marketplace backend for artworks, courses and commissions",
        description="OpenAPI documentation description"
    )

    # --------------------------------------------------------------------------
    # MONGODB CONFIGURATION
    # --------------------------------------------------------------------------
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB: str = Field(
        default="artverse",
        description="MongoDB database name"
    )
    DB_POOL_SIZE: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Database connection pool size"
    )
    DB_POOL_TIMEOUT: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Idle connection timeout in seconds"
    )

    # --------------------------------------------------------------------------
    # SECURITY SETTINGS
    # --------------------------------------------------------------------------
    SECRET_KEY: str = Field(
        default="your-super-secret-key-change-in-production",
        min_length=32,
        description="JWT signing secret key (min 32 chars)"
    )
    ALGORITHM: str = Field(
        default="HS256",
        description="JWT signing algorithm"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60 * 24 * 7,
        ge=1,
        le=60 * 24 * 30,
        description="Session token lifetime in minutes (default 7 days)"
    )

    # --------------------------------------------------------------------------
    # SESSION COOKIE
    # --------------------------------------------------------------------------
    COOKIE_NAME: str = Field(
        default="token",
        description="Name of the http-only session cookie"
    )
    COOKIE_SECURE: bool = Field(
        default=True,
        description="Only send the session cookie over HTTPS"
    )
    COOKIE_SAMESITE: Literal["strict", "lax", "none"] = Field(
        default="strict",
        description="SameSite policy of the session cookie"
    )

    # --------------------------------------------------------------------------
    # CORS SETTINGS
    # --------------------------------------------------------------------------
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:5173"],
        description="Allowed CORS origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True,
        description="Allow credentials in CORS requests"
    )

    # --------------------------------------------------------------------------
    # IMAGE HOSTING
    # --------------------------------------------------------------------------
    STORAGE_BACKEND: StorageBackend = Field(
        default=StorageBackend.DISABLED,
        description="Image hosting backend (s3, disabled)"
    )
    AWS_ACCESS_KEY_ID: Optional[str] = Field(
        default=None,
        description="AWS access key"
    )
    AWS_SECRET_ACCESS_KEY: Optional[str] = Field(
        default=None,
        description="AWS secret key"
    )
    AWS_STORAGE_BUCKET_NAME: Optional[str] = Field(
        default=None,
        description="Bucket holding uploaded images"
    )
    AWS_S3_REGION_NAME: str = Field(
        default="us-east-1",
        description="AWS region of the bucket"
    )
    AWS_S3_ENDPOINT_URL: Optional[str] = Field(
        default=None,
        description="Custom S3 endpoint (MinIO and friends)"
    )

    # --------------------------------------------------------------------------
    # LOGGING CONFIGURATION
    # --------------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # --------------------------------------------------------------------------
    # COMPUTED PROPERTIES
    # --------------------------------------------------------------------------
    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def expose_error_details(self) -> bool:
        """Whether error responses may carry internal details."""
        return self.DEBUG or not self.is_production


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache so the environment is parsed only once per process.

    Returns:
        Settings instance
    """
    return Settings()
