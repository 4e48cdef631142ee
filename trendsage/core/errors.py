from pathlib import Path
from typing import Optional


class TrendsageError(Exception):
    """Base exception for trendsage."""
    pass


class ParseError(TrendsageError):
    """Raised when a persisted JSON artifact cannot be decoded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class ExtraShapeError(TrendsageError):
    """Raised when a launch extra does not match the requested shape."""
    pass
