"""Construction and logging of wrapped I/O failures."""

from __future__ import annotations

from pathlib import Path

from dirkit.errors import FileSystemIOError
from dirkit.platform.logging import logger
from dirkit.shared.types import FsEvent


def io_failure(
    operation: str,
    summary: str,
    paths: tuple[Path, ...],
    cause: OSError,
) -> FileSystemIOError:
    """Log ``cause`` once at ERROR and return the wrapping exception for raising."""

    error = FileSystemIOError(operation, summary, paths, cause)
    logger.error(
        summary,
        extra={
            "fs_event": FsEvent.OPERATION_ERROR,
            "path": str(paths[-1]) if paths else None,
            "operation": operation,
            "error_message": cause.strerror or str(cause),
        },
    )
    return error


__all__ = ["io_failure"]
