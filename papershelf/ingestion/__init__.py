"""
Ingestion module for importing PDF files into the library.

Bridges the file picker into coroutines, allocates collision-free names in
managed storage, and records each import in the database.
"""

from .picker import (
    PickKind,
    PickResult,
    FilePicker,
    StaticPicker,
    BlockingDialogPicker,
    await_selection
)
from .destination import (
    resolve_papers_dir,
    base_filename,
    candidate_name,
    allocate_destination,
    copy_into,
    store_copy,
    derive_title
)
from .pipeline import IngestionPipeline, IngestionResult, NO_FILE_SELECTED

__all__ = [
    "PickKind",
    "PickResult",
    "FilePicker",
    "StaticPicker",
    "BlockingDialogPicker",
    "await_selection",
    "resolve_papers_dir",
    "base_filename",
    "candidate_name",
    "allocate_destination",
    "copy_into",
    "store_copy",
    "derive_title",
    "IngestionPipeline",
    "IngestionResult",
    "NO_FILE_SELECTED"
]
