"""Summary: Create, replace and remove directory symbolic links.
Why: Link maintenance must never clobber real directories or act on a link's target.
"""

from __future__ import annotations

import os
from pathlib import Path

from dirkit.core.failures import io_failure
from dirkit.core.ports import FilesystemPort
from dirkit.errors import RefusedOverwriteError
from dirkit.platform.filesystem import default_filesystem
from dirkit.platform.logging import logger
from dirkit.shared.types import EntryKind, FsEvent, Outcome
from dirkit.shared.validation import require_path


def link_directory(
    link_path: str | os.PathLike[str],
    target_path: str | os.PathLike[str],
    *,
    filesystem: FilesystemPort | None = None,
) -> Outcome:
    """Make ``link_path`` a directory symbolic link pointing at ``target_path``.

    An existing symbolic link at ``link_path`` is removed and recreated rather
    than retargeted. Any other existing entry is left untouched.

    Args:
        link_path: Where the link should live.
        target_path: Directory the link points at. Stored as given.
        filesystem: Port to operate through; the local filesystem by default.

    Returns:
        Outcome: ``CREATED`` for a new link, ``REPLACED`` when an old link was swapped.

    Raises:
        RefusedOverwriteError: If a directory or file already occupies ``link_path``.
        FileSystemIOError: If probing, removing or creating the link fails.
    """
    link = require_path(link_path, "link_path")
    target = require_path(target_path, "target_path")
    fs = filesystem or default_filesystem()

    outcome: Outcome | None = None
    try:
        kind = fs.probe_link_aware(link)
        if kind is EntryKind.MISSING:
            fs.create_symbolic_link(link, target, kind_hint="dir")
            outcome = Outcome.CREATED
        elif kind is EntryKind.SYMBOLIC_LINK:
            fs.remove_file(link)
            fs.create_symbolic_link(link, target, kind_hint="dir")
            outcome = Outcome.REPLACED
    except OSError as exc:
        raise io_failure(
            "link_directory",
            f"Failed to create symbolic link from '{link}' to '{target}'",
            (link, target),
            exc,
        ) from exc

    if outcome is None:
        message = (
            f"The intended symlink '{link}' already exists and is not a symbolic link. "
            f"So, we did not create a symlink from there to '{target}'."
        )
        logger.error(message, extra={"fs_event": FsEvent.LINK_REFUSED, "path": str(link)})
        raise RefusedOverwriteError(message, link, target)

    event = FsEvent.LINK_CREATE if outcome is Outcome.CREATED else FsEvent.LINK_REPLACE
    logger.debug(
        "Symbolic link %s -> %s (%s)",
        link,
        target,
        outcome,
        extra={"fs_event": event, "path": str(link), "target": str(target)},
    )
    return outcome


def unlink_directory(
    link_path: str | os.PathLike[str],
    *,
    filesystem: FilesystemPort | None = None,
) -> Outcome:
    """Remove the symbolic link at ``link_path``.

    Returns:
        Outcome: ``REMOVED`` when a link was deleted, ``NOOP`` when nothing was there.

    Raises:
        RefusedOverwriteError: If ``link_path`` is a directory or file rather than a link.
        FileSystemIOError: If probing or removing the link fails.
    """
    link = require_path(link_path, "link_path")
    fs = filesystem or default_filesystem()

    try:
        kind = fs.probe_link_aware(link)
        if kind is EntryKind.MISSING:
            return Outcome.NOOP
        if kind is EntryKind.SYMBOLIC_LINK:
            fs.remove_file(link)
            logger.debug(
                "Removed symbolic link %s",
                link,
                extra={"fs_event": FsEvent.LINK_REMOVE, "path": str(link)},
            )
            return Outcome.REMOVED
    except OSError as exc:
        raise io_failure(
            "unlink_directory",
            f"Failed to delete the symbolic link '{link}'",
            (link,),
            exc,
        ) from exc

    message = (
        f"The specified symlink '{link}' already exists and is not a symbolic link. "
        "So, we did not delete it."
    )
    logger.error(message, extra={"fs_event": FsEvent.LINK_REFUSED, "path": str(link)})
    raise RefusedOverwriteError(message, link)


__all__ = ["link_directory", "unlink_directory"]
