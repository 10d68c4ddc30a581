"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, reload_config, Config
from .logger import get_logger, setup_logging_from_config
from .exceptions import (
    PaperShelfError,
    ConfigurationError,
    StorageInitError,
    StorageWriteError,
    StorageReadError,
    UnsupportedSourceError,
    InvalidInputError,
    CopyError,
    ReadError,
    PickerError
)

__all__ = [
    "get_config",
    "reload_config",
    "Config",
    "get_logger",
    "setup_logging_from_config",
    "PaperShelfError",
    "ConfigurationError",
    "StorageInitError",
    "StorageWriteError",
    "StorageReadError",
    "UnsupportedSourceError",
    "InvalidInputError",
    "CopyError",
    "ReadError",
    "PickerError"
]
