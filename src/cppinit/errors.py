"""Exceptions raised by cppinit."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error cppinit reports to the user."""


class ProjectNameError(ScaffoldError, ValueError):
    """Raised when a project name is unusable as a directory or symbol."""


class MaterializeError(ScaffoldError):
    """Raised when writing the generated tree fails.

    The first I/O failure aborts the whole run; files written before it are
    left on disk.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"failed to write {path}: {reason}")
