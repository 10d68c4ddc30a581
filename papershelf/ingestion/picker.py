"""
File picker bridge.

Native dialogs report their answer through a callback, possibly from another
thread. ``await_selection`` turns that callback into a single-shot future the
requesting coroutine awaits, so waiting on the user suspends only that task.
"""

import asyncio
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from ..core import get_logger, PickerError

logger = get_logger(__name__)


class PickKind(Enum):
    """Possible answers from a file picker."""
    PATH = "path"
    URL = "url"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PickResult:
    """What the user chose: a local path, a non-local reference, or nothing."""
    kind: PickKind
    path: Optional[Path] = None
    url: Optional[str] = None

    @classmethod
    def local(cls, path: Union[str, Path]) -> "PickResult":
        return cls(PickKind.PATH, path=Path(path))

    @classmethod
    def remote(cls, url: str) -> "PickResult":
        return cls(PickKind.URL, url=url)

    @classmethod
    def cancelled(cls) -> "PickResult":
        return cls(PickKind.CANCELLED)


# A picker hands back either its answer or the exception that stopped it.
PickCallback = Callable[[Union[PickResult, Exception]], None]


class FilePicker(Protocol):
    """Anything that can ask the user for one file and report back once."""

    def pick_file(self, callback: PickCallback) -> None:
        ...


class StaticPicker:
    """Picker that answers immediately with a fixed result."""

    def __init__(self, result: PickResult):
        self.result = result

    def pick_file(self, callback: PickCallback) -> None:
        callback(self.result)


class BlockingDialogPicker:
    """
    Base for pickers whose dialog call blocks until the user answers.

    The dialog runs on a daemon thread and the answer is delivered through
    the callback, keeping ``pick_file`` itself non-blocking. A dialog that
    raises is reported as ``PickerError`` with the original exception in
    ``details["cause"]``. Subclasses implement ``choose``.
    """

    def choose(self) -> PickResult:
        raise NotImplementedError

    def pick_file(self, callback: PickCallback) -> None:
        def worker():
            try:
                result = self.choose()
            except Exception as e:
                logger.error(f"File dialog failed: {e}")
                error = PickerError(
                    f"File dialog failed: {e}",
                    {"error_type": type(e).__name__, "cause": e}
                )
                error.__cause__ = e
                callback(error)
                return
            callback(result)

        threading.Thread(target=worker, name="file-picker", daemon=True).start()


def _resolve(future: asyncio.Future, result: Union[PickResult, Exception]) -> None:
    if future.done():
        return
    if isinstance(result, Exception):
        future.set_exception(result)
    else:
        future.set_result(result)


async def await_selection(picker: FilePicker) -> PickResult:
    """
    Ask the picker for a file and wait for its single answer.

    The callback may fire on any thread; only the first answer counts.

    Args:
        picker: File picker collaborator.

    Returns:
        The user's selection.

    Raises:
        Exception: Whatever the picker reported instead of an answer.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def deliver(result: Union[PickResult, Exception]) -> None:
        loop.call_soon_threadsafe(_resolve, future, result)

    picker.pick_file(deliver)

    return await future
