"""Exceptions raised by dirkit filesystem operations."""

from __future__ import annotations

from pathlib import Path


class DirkitError(Exception):
    """Base exception for dirkit operation failures."""


class FileSystemIOError(DirkitError):
    """Raised when an underlying probe, create, remove or enumerate call fails.

    Attributes:
        operation: Name of the public operation that failed.
        paths: Paths involved in the failure, most specific last.
        cause: The ``OSError`` reported by the filesystem.
    """

    def __init__(
        self,
        operation: str,
        summary: str,
        paths: tuple[Path, ...],
        cause: OSError,
    ) -> None:
        reason = cause.strerror or str(cause) or cause.__class__.__name__
        message = f"{summary}\nReason: {reason}\nFull exception: {cause!r}"
        super().__init__(message)
        self.operation: str = operation
        self.paths: tuple[Path, ...] = paths
        self.cause: OSError = cause


class RefusedOverwriteError(DirkitError):
    """Raised when a non-link entry occupies a path where a link was expected."""

    def __init__(self, message: str, path: Path, target: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path = path
        self.target: Path | None = target


__all__ = ["DirkitError", "FileSystemIOError", "RefusedOverwriteError"]
