# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().STELLAR_NETWORK)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Validation happens once, at startup. A missing or invalid value stops the
# process before any route is registered.
# =============================================================================

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    Instances are frozen; read them through `get_settings()`.
    """

    # -------------------------------------------------------------------------
    # Stellar / Soroban Configuration
    # -------------------------------------------------------------------------
    # The RPC URL is required - app won't start without it

    STELLAR_RPC_URL: str = Field(
        ...,
        pattern=r"^https?://\S+$",
        description="Soroban RPC endpoint (e.g., https://soroban-testnet.stellar.org)"
    )

    STELLAR_NETWORK: Literal["testnet", "futurenet", "mainnet"] = Field(
        default="testnet",
        description="Stellar network the savings contracts are deployed on"
    )

    CONTRACT_ID: str | None = Field(
        default=None,
        pattern=r"^C[A-Z2-7]{55}$",
        description="Deployed savings contract id (strkey, starts with C)"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3001,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty values as unset so required keys can't be blanked out
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        # Unrelated environment variables are tolerated
        extra="ignore",
        # Read-only after startup
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://nestera.app" -> ["http://localhost:3000", "https://nestera.app"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


def load_settings() -> Settings:
    """
    Build and validate Settings from the environment.

    Raises:
        ConfigurationError: One or more keys are missing or invalid. The
            error names every failing key.
    """
    try:
        return Settings()
    except ValidationError as e:
        keys = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        logger.error(f"Invalid configuration for: {', '.join(keys)}")
        raise ConfigurationError(keys=keys, error=str(e)) from e


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return load_settings()
