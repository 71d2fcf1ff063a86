"""Error taxonomy for the board application.

Out-of-range navigation is deliberately absent: list operations clamp.
"""

from pathlib import Path
from typing import Optional, Union


class BoardError(Exception):
    """Base class for all board errors."""


class StartupError(BoardError):
    """Terminal cannot be put into full-screen raw mode."""


class MalformedFileError(BoardError):
    """Board file exists but its section markers are invalid."""

    def __init__(self, path: Union[str, Path], line: Optional[int], reason: str):
        self.path = Path(path)
        self.line = line
        self.reason = reason
        where = f"{self.path}:{line}" if line is not None else str(self.path)
        super().__init__(f"{where}: {reason}")


class SaveError(BoardError):
    """Board could not be written to disk."""

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not save {self.path}: {cause}")


__all__ = ["BoardError", "StartupError", "MalformedFileError", "SaveError"]
