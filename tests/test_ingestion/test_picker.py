"""
Tests for the file picker bridge.
"""

import asyncio
import threading
from pathlib import Path

import pytest

from papershelf.core.exceptions import PickerError
from papershelf.ingestion.picker import (
    BlockingDialogPicker,
    PickKind,
    PickResult,
    StaticPicker,
    await_selection,
)


class ThreadedCallbackPicker:
    """Answers from another thread after a delay, like a native dialog."""

    def __init__(self, result, delay: float = 0.05):
        self.result = result
        self.delay = delay

    def pick_file(self, callback):
        timer = threading.Timer(self.delay, callback, args=(self.result,))
        timer.start()


class DoubleAnsweringPicker:
    """Calls back twice; only the first answer may count."""

    def pick_file(self, callback):
        callback(PickResult.local("/first.pdf"))
        callback(PickResult.local("/second.pdf"))


class FakeDialog(BlockingDialogPicker):
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def choose(self) -> PickResult:
        if self.error:
            raise self.error
        return self.result


class TestPickResult:
    """Tests for PickResult constructors."""

    def test_local(self):
        result = PickResult.local("/tmp/paper.pdf")

        assert result.kind is PickKind.PATH
        assert result.path == Path("/tmp/paper.pdf")

    def test_remote(self):
        result = PickResult.remote("https://example.org/paper.pdf")

        assert result.kind is PickKind.URL
        assert result.url == "https://example.org/paper.pdf"
        assert result.path is None

    def test_cancelled(self):
        assert PickResult.cancelled().kind is PickKind.CANCELLED


class TestAwaitSelection:
    """Tests for await_selection."""

    @pytest.mark.asyncio
    async def test_static_picker(self):
        """Test an immediate answer."""
        result = await await_selection(StaticPicker(PickResult.local("/a.pdf")))

        assert result.path == Path("/a.pdf")

    @pytest.mark.asyncio
    async def test_answer_from_other_thread(self):
        """Test a callback fired on a foreign thread."""
        expected = PickResult.local("/b.pdf")

        result = await await_selection(ThreadedCallbackPicker(expected))

        assert result == expected

    @pytest.mark.asyncio
    async def test_waiting_does_not_block_loop(self):
        """Test that other tasks progress while the picker is open."""
        ticks = 0

        async def ticker():
            nonlocal ticks
            for _ in range(5):
                await asyncio.sleep(0.005)
                ticks += 1

        picker = ThreadedCallbackPicker(PickResult.cancelled(), delay=0.2)
        result, _ = await asyncio.gather(await_selection(picker), ticker())

        assert result.kind is PickKind.CANCELLED
        assert ticks == 5

    @pytest.mark.asyncio
    async def test_only_first_answer_counts(self):
        """Test that a second callback is ignored."""
        result = await await_selection(DoubleAnsweringPicker())

        assert result.path == Path("/first.pdf")


class TestBlockingDialogPicker:
    """Tests for BlockingDialogPicker."""

    @pytest.mark.asyncio
    async def test_delivers_choice(self):
        """Test that the dialog answer reaches the awaiting task."""
        result = await await_selection(FakeDialog(PickResult.local("/c.pdf")))

        assert result.path == Path("/c.pdf")

    @pytest.mark.asyncio
    async def test_dialog_failure_raises_picker_error(self):
        """Test that a failing dialog raises PickerError in the awaiting task."""
        original = RuntimeError("no display")

        with pytest.raises(PickerError, match="no display") as exc_info:
            await await_selection(FakeDialog(error=original))

        assert exc_info.value.details["cause"] is original
        assert exc_info.value.details["error_type"] == "RuntimeError"
        assert exc_info.value.__cause__ is original

    def test_choose_must_be_implemented(self):
        with pytest.raises(NotImplementedError):
            BlockingDialogPicker().choose()
