"""
File utility functions for PaperShelf.

Provides directory management and whole-file reads used to stream stored
papers back to a viewer.
"""

import asyncio
from pathlib import Path
from typing import Union

from ..core.exceptions import ReadError


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Create directory tree if it doesn't exist.

    Args:
        path: Directory path to create.

    Returns:
        Path object of the directory.
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_file_size_mb(filepath: Union[str, Path]) -> float:
    """
    Get file size in megabytes.

    Args:
        filepath: Path to the file.

    Returns:
        File size in MB, rounded to 2 decimal places.
    """
    filepath = Path(filepath)
    size_bytes = filepath.stat().st_size
    return round(size_bytes / (1024 * 1024), 2)


def read_bytes(path: Union[str, Path]) -> bytes:
    """
    Read the full contents of a file.

    No size limit is applied; callers own any size policy.

    Args:
        path: File to read.

    Returns:
        File contents.

    Raises:
        ReadError: If the path is missing, not a file, or unreadable.
    """
    path = Path(path)

    if not path.is_file():
        raise ReadError(f"Failed to read PDF: no such file: {path}", path=str(path))

    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadError(f"Failed to read PDF: {e}", path=str(path))


async def read_bytes_async(path: Union[str, Path]) -> bytes:
    """Read a file on a worker thread so the event loop stays free."""
    return await asyncio.to_thread(read_bytes, path)
