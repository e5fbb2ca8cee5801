"""Package-specific exception types."""

from __future__ import annotations


class ContentFileError(Exception):
    """Base class for failures while loading a slide file.

    Parsing a slide body never fails; only reading one from disk can.
    """


class FileTooLargeError(ContentFileError):
    """Raised when a slide file exceeds the configured maximum size.

    Args:
        filepath: Path to the offending file.
        size: Actual file size in bytes.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: object, size: int, max_size: int):
        self.filepath = filepath
        self.size = size
        self.max_size = max_size
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"{self.filepath} is {self.size} bytes, exceeding the maximum allowed size "
            f"of {self.max_size} bytes."
        )
