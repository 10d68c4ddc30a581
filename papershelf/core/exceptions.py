"""
Custom exception hierarchy for PaperShelf.

Provides specific exception types for the failure modes of the library:
configuration problems, storage initialization, database reads and writes,
unsupported or invalid sources, file copy or read failures, and file
picker failures.

Cancelling the file picker is not an error and has no exception type.
"""


class PaperShelfError(Exception):
    """Base exception for all PaperShelf errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PaperShelfError):
    """Raised when configuration is invalid or missing."""
    pass


class StorageInitError(PaperShelfError):
    """Raised when the database or the storage directory cannot be reached."""
    pass


class StorageWriteError(PaperShelfError):
    """Raised when a database write fails."""
    pass


class StorageReadError(PaperShelfError):
    """Raised when a database query fails."""
    pass


class UnsupportedSourceError(PaperShelfError):
    """Raised when the picker returns a non-local (URL) reference."""

    def __init__(self, message: str, url: str = None, details: dict = None):
        """
        Initialize unsupported source error.

        Args:
            message: Error description.
            url: The rejected reference.
            details: Additional context.
        """
        super().__init__(message, details)
        self.url = url


class InvalidInputError(PaperShelfError):
    """Raised when a source path has no usable file name."""
    pass


class CopyError(PaperShelfError):
    """Raised when copying a source file into managed storage fails."""

    def __init__(
        self,
        message: str,
        source: str = None,
        destination: str = None,
        details: dict = None
    ):
        """
        Initialize copy error.

        Args:
            message: Error description.
            source: Path of the file being copied.
            destination: Path the copy was written to.
            details: Additional context.
        """
        super().__init__(message, details)
        self.source = source
        self.destination = destination


class ReadError(PaperShelfError):
    """Raised when a stored file cannot be read back."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        """
        Initialize read error.

        Args:
            message: Error description.
            path: Path that could not be read.
            details: Additional context.
        """
        super().__init__(message, details)
        self.path = path


class PickerError(PaperShelfError):
    """Raised when the file picker fails instead of answering."""
    pass
