# line_filter/errors.py
from __future__ import annotations

from pathlib import Path


class LineFilterError(RuntimeError):
    """Base class for line_filter errors."""
    pass


class ArgumentParseError(LineFilterError):
    """
    Raised when the command line is malformed (unknown option,
    option without its value and so on). Fatal: nothing is processed.
    """
    pass


class FileReadError(LineFilterError):
    """Input file could not be opened or decoded."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to read {path}: {cause}")
        self.path = path
        self.cause = cause


class FileWriteError(LineFilterError):
    """Category file could not be created or written."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause
