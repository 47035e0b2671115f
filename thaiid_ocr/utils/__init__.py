"""Utilities package."""

from .config import Settings, settings
from .log import LoggerMixin, configure_logging, get_logger

__all__ = [
    "Settings",
    "settings",
    "get_logger",
    "LoggerMixin",
    "configure_logging",
]
