"""Summary: Create a directory and every missing ancestor, top-down.
Why: Callers need whole paths to exist before writing files into them.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

from dirkit.core.failures import io_failure
from dirkit.core.ports import FilesystemPort
from dirkit.platform.filesystem import default_filesystem
from dirkit.platform.logging import logger
from dirkit.shared.types import EntryKind, FsEvent
from dirkit.shared.validation import require_path


def _canonicalize(path: Path) -> Path:
    """Resolve ``path`` against the working directory without following links.

    Backslashes are treated as separators on every platform.
    """

    raw = os.fspath(path).replace("\\", "/")
    return Path(os.path.normpath(os.path.abspath(raw)))


def _segments(path: Path) -> list[Path]:
    """Return every accumulated prefix of ``path`` below its anchor, outermost first."""

    return [*reversed(path.parents[:-1]), path] if path != Path(path.anchor) else []


def ensure_dirs(
    path: str | os.PathLike[str],
    *,
    filesystem: FilesystemPort | None = None,
) -> list[Path]:
    """Ensure ``path`` and all of its ancestors exist as directories.

    Existing segments are left alone, so repeated calls are no-ops. Segments
    are created outermost first; a failure leaves already created ancestors
    in place.

    Args:
        path: Absolute or relative directory path.
        filesystem: Port to operate through; the local filesystem by default.

    Returns:
        list[Path]: Directories created by this call, in creation order.

    Raises:
        ValueError: If ``path`` is blank.
        FileSystemIOError: If a segment cannot be created or exists as a non-directory.
    """
    requested = require_path(path, "path")
    fs = filesystem or default_filesystem()
    target = _canonicalize(requested)

    created: list[Path] = []
    for segment in _segments(target):
        try:
            kind = fs.probe_following(segment)
            if kind is EntryKind.DIRECTORY:
                continue
            if kind is not EntryKind.MISSING:
                raise NotADirectoryError(
                    errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(segment)
                )
            try:
                fs.create_directory(segment)
            except FileExistsError:
                # Another creator got there first; only a directory is acceptable.
                if fs.probe_following(segment) is not EntryKind.DIRECTORY:
                    raise
                continue
        except OSError as exc:
            raise io_failure(
                "ensure_dirs",
                f"Failed to create directory '{segment}' while creating '{target}'",
                (target, segment),
                exc,
            ) from exc

        created.append(segment)
        logger.debug(
            "Created directory %s",
            segment,
            extra={"fs_event": FsEvent.DIRECTORY_CREATE, "path": str(segment)},
        )

    return created


def ensure_dirs_for_file(
    file_path: str | os.PathLike[str],
    *,
    filesystem: FilesystemPort | None = None,
) -> list[Path]:
    """Ensure the directories containing ``file_path`` exist.

    The final segment is treated as a file name and is never created.
    """
    requested = require_path(file_path, "file_path")
    return ensure_dirs(_canonicalize(requested).parent, filesystem=filesystem)


__all__ = ["ensure_dirs", "ensure_dirs_for_file"]
