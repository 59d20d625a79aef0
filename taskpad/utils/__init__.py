"""Utilities for taskpad."""

from .config_manager import ConfigManager
from .logging_setup import configure_logging

__all__ = [
    'ConfigManager',
    'configure_logging',
]
