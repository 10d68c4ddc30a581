"""
Utility module providing shared helper functions.

Contains path normalization and file operations used across the
application. Depends only on the core module.
"""

from .path_utils import (
    strip_verbose_prefix,
    normalize_path,
    build_connection_locator,
    default_app_data_dir
)
from .file_utils import (
    ensure_directory,
    get_file_size_mb,
    read_bytes,
    read_bytes_async
)

__all__ = [
    "strip_verbose_prefix",
    "normalize_path",
    "build_connection_locator",
    "default_app_data_dir",
    "ensure_directory",
    "get_file_size_mb",
    "read_bytes",
    "read_bytes_async"
]
