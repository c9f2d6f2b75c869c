"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared by the whole application.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_search.catalog.models import SearchStrategy


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        products_file: Path to product catalog JSON
        search_strategy: Default search algorithm (indexed or scan)
        verify_equivalence: Run both strategies and fail on disagreement
        default_result_limit: Result cap for API listings
        cors_origins: Allowed CORS origins (JSON array string)
    
    Example:
        >>> settings = Settings()
        >>> settings.search_strategy
        <SearchStrategy.INDEXED: 'indexed'>
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )
    
    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Catalog Search API",
        description="Display name for the application"
    )
    
    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )
    
    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )
    
    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )
    
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )
    
    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="data/products.json",
        description="Path to product catalog JSON"
    )
    
    search_strategy: SearchStrategy = Field(
        default=SearchStrategy.INDEXED,
        description="Default search algorithm: indexed or scan"
    )
    
    verify_equivalence: bool = Field(
        default=False,
        description="Cross-check indexed results against a linear scan"
    )
    
    default_result_limit: int = Field(
        default=100,
        ge=1,
        le=500,
        description="Maximum products returned by listing endpoints"
    )
    
    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )
    
    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.
        
        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()
        
        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"
        
        return normalized
    
    @field_validator("search_strategy", mode="before")
    @classmethod
    def validate_search_strategy(cls, value):
        """
        Accept strategy names case-insensitively.
        
        Raises:
            ValueError: If the strategy is not supported
        """
        if isinstance(value, SearchStrategy):
            return value
        
        normalized = str(value).lower().strip()
        supported = {strategy.value for strategy in SearchStrategy}
        
        if normalized not in supported:
            raise ValueError(
                f"Unsupported search strategy: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )
        
        return normalized
    
    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"
    
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"
    
    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)
    
    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.
        
        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]
    
    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"search_strategy={self.search_strategy.value!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.
    
    Cached so the environment is read once per process. Tests call
    ``get_settings.cache_clear()`` after changing the environment.
    """
    settings = Settings()
    
    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")
    
    return settings
