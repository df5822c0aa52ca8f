"""
Configuration Management

Centralized configuration for:
- Local snapshot storage
- Shareable link base URL
- File export location
- Logging
"""

from .settings import (
    Settings,
    StorageConfig,
    SharingConfig,
    ExportConfig,
    get_settings
)
from .logging_setup import configure_logging

__all__ = [
    "Settings",
    "StorageConfig",
    "SharingConfig",
    "ExportConfig",
    "get_settings",
    "configure_logging"
]
