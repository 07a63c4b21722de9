from __future__ import annotations

from pathlib import Path
from typing import Tuple


class PeopleSynthError(Exception):
    """Base class for errors that end a run."""


class InvalidParameter(PeopleSynthError, ValueError):
    def __init__(self, message: str, value=None, bounds: Tuple[int, int] | None = None):
        super().__init__(message)
        self.value = value
        self.bounds = bounds


class IOFailure(PeopleSynthError, OSError):
    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause
