"""
Path normalization for building SQLite connection locators.

Windows may hand out extended-length paths carrying a verbose prefix
(``\\\\?\\C:\\...``). SQLite URIs need the plain form with forward slashes,
so every path is canonicalized here before it reaches the store.
"""

import os
import sys
from pathlib import Path
from typing import Union

from ..core.exceptions import StorageInitError

VERBOSE_PREFIX = "\\\\?\\"

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _as_text(path: PathInput) -> str:
    """Convert any path value to text, failing only for undecodable bytes."""
    path = os.fspath(path)

    if isinstance(path, bytes):
        try:
            return path.decode(sys.getfilesystemencoding())
        except UnicodeDecodeError as e:
            raise StorageInitError(
                f"Path cannot be represented as text: {e}",
                {"path": repr(path)}
            )

    return path


def strip_verbose_prefix(path: PathInput) -> str:
    """
    Remove the Windows extended-length marker from a path.

    Exactly the leading ``\\\\?\\`` is dropped and the remainder is kept
    as is, so ``\\\\?\\UNC\\server\\share`` becomes ``UNC\\server\\share``.
    Paths without the marker are returned unchanged.

    Args:
        path: Path to clean.

    Returns:
        The path as text without the marker.
    """
    text = _as_text(path)

    if text.startswith(VERBOSE_PREFIX):
        return text[len(VERBOSE_PREFIX):]

    return text


def normalize_path(path: PathInput) -> str:
    """
    Canonicalize a path for use in a connection string.

    Args:
        path: Path to normalize.

    Returns:
        Path without the verbose marker, using forward slashes.
    """
    return strip_verbose_prefix(path).replace("\\", "/")


def build_connection_locator(db_path: PathInput) -> str:
    """
    Build the SQLite URI for a database file with read/write/create mode.

    Args:
        db_path: Location of the database file.

    Returns:
        URI of the form ``file:<path>?mode=rwc``.
    """
    return f"file:{normalize_path(db_path)}?mode=rwc"


def default_app_data_dir(app_name: str = "papershelf") -> Path:
    """
    Resolve the platform's application-local data directory.

    Args:
        app_name: Subdirectory name for this application.

    Returns:
        Directory path (not created).
    """
    if sys.platform.startswith("win"):
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Local"
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_DATA_HOME")
        root = Path(base) if base else Path.home() / ".local" / "share"

    return root / app_name
