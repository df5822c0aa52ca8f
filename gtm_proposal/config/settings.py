"""
Settings Management with Pydantic

Provides type-safe configuration management with:
- Environment variable support
- Validation
- Storage, sharing and export configuration
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """Local snapshot storage configuration."""
    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        extra="ignore"
    )

    # Directory holding one JSON file per key
    directory: str = "./data/proposal"
    key: str = "gtm-proposal-state-v1"


class SharingConfig(BaseSettings):
    """Shareable link configuration."""
    model_config = SettingsConfigDict(
        env_prefix="SHARE_",
        extra="ignore"
    )

    # origin + path of the hosted proposal page
    base_url: str = "http://localhost:5173/"
    fragment_key: str = "state"


class ExportConfig(BaseSettings):
    """File export configuration."""
    model_config = SettingsConfigDict(
        env_prefix="EXPORT_",
        extra="ignore"
    )

    directory: str = "./exports"
    # Overrides the fixed export filename when set
    filename: Optional[str] = None


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "GTM Proposal Workspace"
    debug: bool = False
    log_level: str = "INFO"

    # Sub-configurations
    storage: StorageConfig = Field(default_factory=StorageConfig)
    sharing: SharingConfig = Field(default_factory=SharingConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            storage=StorageConfig(),
            sharing=SharingConfig(),
            export=ExportConfig()
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
