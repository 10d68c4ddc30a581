"""
Tests for custom exception classes.

Tests exception creation, message formatting, and details handling.
"""

import pytest

from papershelf.core.exceptions import (
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


class TestPaperShelfError:
    """Tests for base PaperShelfError."""

    def test_basic_creation(self):
        """Test creating exception with just a message."""
        error = PaperShelfError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_creation_with_details(self):
        """Test creating exception with details dict."""
        error = PaperShelfError(
            "File error",
            {"filename": "test.pdf", "size": 1024}
        )

        assert error.message == "File error"
        assert error.details["filename"] == "test.pdf"
        assert error.details["size"] == 1024


class TestHierarchy:
    """Every domain error is catchable as PaperShelfError."""

    @pytest.mark.parametrize("error_class", [
        ConfigurationError,
        StorageInitError,
        StorageWriteError,
        StorageReadError,
        UnsupportedSourceError,
        InvalidInputError,
        CopyError,
        ReadError,
        PickerError
    ])
    def test_can_be_caught_as_base(self, error_class):
        """Test that each subclass can be caught as PaperShelfError."""
        with pytest.raises(PaperShelfError):
            raise error_class("Test error")


class TestCopyError:
    """Tests for CopyError."""

    def test_with_paths(self):
        """Test CopyError keeps source and destination."""
        error = CopyError(
            "Copy failed: disk full",
            source="/home/me/paper.pdf",
            destination="/data/papers/paper.pdf"
        )

        assert error.source == "/home/me/paper.pdf"
        assert error.destination == "/data/papers/paper.pdf"
        assert error.message == "Copy failed: disk full"


class TestUnsupportedSourceError:
    """Tests for UnsupportedSourceError."""

    def test_with_url(self):
        """Test UnsupportedSourceError keeps the rejected reference."""
        error = UnsupportedSourceError(
            "URL selection not supported",
            url="https://example.org/paper.pdf"
        )

        assert error.url == "https://example.org/paper.pdf"


class TestReadError:
    """Tests for ReadError."""

    def test_with_path_and_details(self):
        """Test ReadError with path and details."""
        error = ReadError(
            "Failed to read PDF",
            path="/missing.pdf",
            details={"errno": 2}
        )

        assert error.path == "/missing.pdf"
        assert error.details["errno"] == 2
