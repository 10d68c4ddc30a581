"""
Managed storage for imported papers.

Resolves the papers directory, picks a collision-free name for each new
copy, and writes the bytes. Name allocation uses an exclusive create, so two
imports racing on the same file name always end up with different files.
"""

import shutil
from pathlib import Path
from typing import BinaryIO, Tuple, Union

from ..core import get_logger, CopyError, InvalidInputError, StorageInitError
from ..utils.file_utils import ensure_directory

logger = get_logger(__name__)

PDF_SUFFIX = ".pdf"
COPY_CHUNK_SIZE = 1024 * 1024


def resolve_papers_dir(app_data_dir: Union[str, Path], subdirectory: str = "papers") -> Path:
    """
    Locate the papers directory under the application data directory.

    Args:
        app_data_dir: Application-local storage root.
        subdirectory: Name of the papers folder.

    Returns:
        Absolute path of the (now existing) papers directory.

    Raises:
        StorageInitError: If the directory cannot be created.
    """
    papers_dir = Path(app_data_dir).expanduser().absolute() / subdirectory

    try:
        ensure_directory(papers_dir)
    except OSError as e:
        raise StorageInitError(
            f"Path resolve error: {e}",
            {"directory": str(papers_dir)}
        )

    return papers_dir


def base_filename(source: Union[str, Path]) -> str:
    """
    Get the file name component of a source path.

    Raises:
        InvalidInputError: If the path has no usable file name.
    """
    name = Path(source).name

    if not name or name in (".", ".."):
        raise InvalidInputError("Invalid file name", {"source": str(source)})

    return name


def candidate_name(file_name: str, counter: int) -> str:
    """
    Name to try on the given attempt.

    Attempt 0 is the original name; attempt N appends ``_N`` before the
    ``.pdf`` suffix, after stripping any trailing ``.pdf`` from the name.
    """
    if counter == 0:
        return file_name

    stem = file_name
    while stem.endswith(PDF_SUFFIX):
        stem = stem[:-len(PDF_SUFFIX)]

    return f"{stem}_{counter}{PDF_SUFFIX}"


def allocate_destination(papers_dir: Path, file_name: str) -> Tuple[Path, BinaryIO]:
    """
    Create the first free destination file for ``file_name``.

    Args:
        papers_dir: Directory holding the stored papers.
        file_name: Name of the source file.

    Returns:
        The chosen path and a binary handle open for writing on it.

    Raises:
        CopyError: If the directory refuses the new file for any reason
            other than the name being taken.
    """
    counter = 0

    while True:
        candidate = papers_dir / candidate_name(file_name, counter)

        try:
            handle = open(candidate, "xb")
        except FileExistsError:
            counter += 1
            continue
        except OSError as e:
            raise CopyError(
                f"Copy failed: {e}",
                destination=str(candidate)
            )

        if counter:
            logger.debug(f"Name taken, storing as: {candidate.name}")

        return candidate, handle


def discard_partial(destination: Path) -> None:
    """Remove a destination file left behind by a failed copy."""
    try:
        destination.unlink()
    except FileNotFoundError:
        return
    except OSError as e:
        logger.warning(f"Could not remove partial copy {destination}: {e}")
        return

    logger.warning(f"Removed partial copy: {destination}")


def copy_into(source: Union[str, Path], handle: BinaryIO, destination: Path) -> None:
    """
    Copy the full contents of ``source`` into an allocated destination.

    Closes ``handle``. On failure the partial destination is removed.

    Raises:
        CopyError: If the source is unreadable or the destination unwritable.
    """
    try:
        with handle, open(source, "rb") as src:
            shutil.copyfileobj(src, handle, COPY_CHUNK_SIZE)
    except OSError as e:
        discard_partial(destination)
        raise CopyError(
            f"Copy failed: {e}",
            source=str(source),
            destination=str(destination)
        )


def store_copy(source: Union[str, Path], papers_dir: Path, file_name: str) -> Path:
    """
    Allocate a collision-free destination and copy ``source`` into it.

    Returns:
        Path of the stored copy.
    """
    destination, handle = allocate_destination(papers_dir, file_name)
    copy_into(source, handle, destination)
    return destination


def derive_title(destination: Union[str, Path], default: str = "Untitled") -> str:
    """Title for a stored paper: its file name without extension."""
    return Path(destination).stem or default
