"""
Commands exposed to presentation layers.

Each command is a coroutine taking the application state explicitly.
Failures are raised as ``PaperShelfError`` subclasses; ``run_command``
turns them into text for front ends that only display messages.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Union

from ..core import get_logger, PaperShelfError
from ..ingestion import FilePicker
from ..utils.file_utils import read_bytes_async
from .state import AppState

logger = get_logger(__name__)


async def add_paper(state: AppState, picker: FilePicker) -> str:
    """
    Run the full ingestion for whatever the picker returns.

    Returns:
        Success message with the derived title, or "No file selected".
    """
    result = await state.pipeline.ingest(picker)
    return result.message


async def get_papers(state: AppState) -> List[dict]:
    """All stored papers, newest first, as plain dictionaries."""
    papers = await state.repository.list_all()
    return [paper.to_dict() for paper in papers]


async def read_pdf_file(path: Union[str, Path]) -> bytes:
    """Full contents of a stored PDF."""
    return await read_bytes_async(path)


async def db_health_check(state: AppState) -> str:
    """Confirm the database answers and report how many papers it holds."""
    count = await state.repository.count()
    return f"Database connected. Papers stored: {count}"


def greet(name: str) -> str:
    return f"Hello, {name}! The app is ready"


@dataclass
class CommandResponse:
    """Value of a command, or the text of its failure."""
    ok: bool
    value: Any = None
    error: Optional[str] = None


async def run_command(command: Callable[..., Awaitable[Any]], *args) -> CommandResponse:
    """
    Await a command and capture domain failures as text.

    Only ``PaperShelfError`` is captured; anything else propagates.

    Args:
        command: One of the command coroutines.
        *args: Arguments for the command.

    Returns:
        CommandResponse carrying either the value or the error message.
    """
    try:
        value = await command(*args)
    except PaperShelfError as e:
        logger.error(f"{command.__name__} failed: {e.message}")
        return CommandResponse(ok=False, error=e.message)

    return CommandResponse(ok=True, value=value)
