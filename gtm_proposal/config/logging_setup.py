"""Logging setup driven by Settings.log_level."""

import logging

from .settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings = None) -> None:
    """Configure the root logger once for scripts and demos."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("gtm_proposal").setLevel(level)
