"""
Configuration modules for the Habity API service.
"""

from .logging import setup_application_logging, get_logger, configure_structured_logging
from .settings import AppSettings, DEFAULT_JWT_SECRET, load_settings

__all__ = [
    "setup_application_logging",
    "get_logger",
    "configure_structured_logging",
    "AppSettings",
    "DEFAULT_JWT_SECRET",
    "load_settings",
]
