"""Summary: Delete a directory tree without ever following symbolic links.
Why: Links inside a tree may point outside it or back into it; only the link itself may go.
"""

from __future__ import annotations

import os
from pathlib import Path

from dirkit.core.failures import io_failure
from dirkit.core.ports import FilesystemPort
from dirkit.platform.filesystem import default_filesystem
from dirkit.platform.logging import logger
from dirkit.shared.types import EntryKind, FsEvent, Outcome
from dirkit.shared.validation import require_path

_LEAF_KINDS: frozenset[EntryKind] = frozenset({EntryKind.SYMBOLIC_LINK, EntryKind.REGULAR_FILE})


def _visit(
    fs: FilesystemPort,
    path: Path,
    kind: EntryKind,
    stack: list[tuple[Path, bool]],
) -> int:
    """Unlink a leaf entry, or queue a directory and its children; return entries removed."""

    if kind is EntryKind.MISSING:
        return 0
    if kind in _LEAF_KINDS:
        fs.remove_file(path)
        return 1
    stack.append((path, True))
    stack.extend((path / name, False) for name in fs.list_children(path))
    return 0


def delete_tree(
    root_path: str | os.PathLike[str],
    *,
    filesystem: FilesystemPort | None = None,
) -> Outcome:
    """Remove ``root_path`` and, when it is a directory, everything beneath it.

    Symbolic links are unlinked as leaf entries and never traversed, so a link
    pointing outside the tree (or back into it) leaves its target untouched.
    Directories are emptied depth-first and removed after their children,
    using an explicit work stack rather than recursion.

    Deletion is not transactional: on failure the tree is left in whatever
    state had been reached.

    Args:
        root_path: File, link or directory to delete.
        filesystem: Port to operate through; the local filesystem by default.

    Returns:
        Outcome: ``REMOVED`` when something was deleted, ``NOOP`` when the path was absent.

    Raises:
        FileSystemIOError: If any probe, unlink, enumeration or directory removal
            fails. ``paths`` holds the root followed by the entry being processed.
    """
    root = require_path(root_path, "root_path")
    fs = filesystem or default_filesystem()

    # (path, expanded): expanded directories only await their own removal.
    stack: list[tuple[Path, bool]] = []
    current = root
    removed = 0
    try:
        kind = fs.probe_link_aware(root)
        if kind is EntryKind.MISSING:
            logger.debug(
                "Nothing to delete at %s",
                root,
                extra={"fs_event": FsEvent.TREE_NOOP, "path": str(root)},
            )
            return Outcome.NOOP

        removed += _visit(fs, root, kind, stack)
        while stack:
            current, expanded = stack.pop()
            if expanded:
                fs.remove_directory(current)
                removed += 1
                continue
            removed += _visit(fs, current, fs.probe_link_aware(current), stack)
    except OSError as exc:
        raise io_failure(
            "delete_tree",
            f"Failed to delete the directory tree '{root}' at '{current}'",
            (root, current),
            exc,
        ) from exc

    logger.debug(
        "Deleted tree %s",
        root,
        extra={"fs_event": FsEvent.TREE_DELETE, "path": str(root), "removed_entries": removed},
    )
    return Outcome.REMOVED


__all__ = ["delete_tree"]
