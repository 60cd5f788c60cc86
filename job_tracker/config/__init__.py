"""
Configuration package.
"""

from .logging import configure_logging, get_logger, log_environment_setup
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    # Logging
    "configure_logging",
    "get_logger",
    "log_environment_setup",
]
