"""
Ingestion pipeline: from a picked file to a stored copy plus a database row.

Steps run in order and the first failure aborts the rest. Nothing is
retried and nothing already done is rolled back: if the insert fails after
the copy succeeded, the copy stays on disk as an orphan that no listing
will show.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..core import get_logger, StorageWriteError, UnsupportedSourceError
from ..database import PaperRepository
from .destination import base_filename, derive_title, resolve_papers_dir, store_copy
from .picker import FilePicker, PickKind, PickResult, StaticPicker, await_selection

logger = get_logger(__name__)

NO_FILE_SELECTED = "No file selected"


@dataclass
class IngestionResult:
    """Outcome of one ingestion request that did not fail."""
    status: str
    message: str
    paper_id: Optional[int] = None
    title: Optional[str] = None
    pdf_path: Optional[str] = None

    @property
    def added(self) -> bool:
        return self.status == "added"

    @classmethod
    def cancelled(cls) -> "IngestionResult":
        return cls(status="cancelled", message=NO_FILE_SELECTED)


class IngestionPipeline:
    """
    Imports papers into managed storage.

    Args:
        repository: Repository the new rows are written to.
        app_data_dir: Application-local storage root.
        papers_subdirectory: Folder under ``app_data_dir`` holding the copies.
        default_title: Title used when none can be derived from the name.
    """

    def __init__(
        self,
        repository: PaperRepository,
        app_data_dir: Union[str, Path],
        papers_subdirectory: str = "papers",
        default_title: str = "Untitled"
    ):
        self.repository = repository
        self.app_data_dir = Path(app_data_dir)
        self.papers_subdirectory = papers_subdirectory
        self.default_title = default_title

    async def ingest(self, picker: FilePicker) -> IngestionResult:
        """
        Ask the picker for a file and import it.

        Returns:
            An "added" result, or a "cancelled" result if the user chose
            nothing.

        Raises:
            PickerError: If the file dialog failed.
            UnsupportedSourceError: If a non-local reference was picked.
            StorageInitError: If the papers directory cannot be created.
            InvalidInputError: If the source has no usable file name.
            CopyError: If copying fails.
            StorageWriteError: If the database insert fails.
        """
        selection = await await_selection(picker)

        if selection.kind is PickKind.URL:
            raise UnsupportedSourceError("URL selection not supported", url=selection.url)

        if selection.kind is PickKind.CANCELLED:
            logger.info(NO_FILE_SELECTED)
            return IngestionResult.cancelled()

        return await self.store(selection.path)

    async def ingest_path(self, source: Union[str, Path]) -> IngestionResult:
        """Import a file whose path is already known."""
        return await self.ingest(StaticPicker(PickResult.local(source)))

    async def store(self, source: Union[str, Path]) -> IngestionResult:
        """Run every step after selection for a local source path."""
        papers_dir = await asyncio.to_thread(
            resolve_papers_dir, self.app_data_dir, self.papers_subdirectory
        )

        file_name = base_filename(source)

        logger.info(f"Importing {source} into {papers_dir}")
        destination = await asyncio.to_thread(store_copy, source, papers_dir, file_name)

        title = derive_title(destination, self.default_title)
        pdf_path = str(destination)

        try:
            paper_id = await self.repository.insert(title, pdf_path)
        except StorageWriteError:
            logger.warning(f"Copied file has no database row: {pdf_path}")
            raise

        logger.info(f"Paper added: id={paper_id} title={title!r}")

        return IngestionResult(
            status="added",
            message=f"Paper added successfully: {title}",
            paper_id=paper_id,
            title=title,
            pdf_path=pdf_path
        )
