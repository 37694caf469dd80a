"""Symlink-safe directory tree creation, deletion and directory link management."""

from dirkit.core import (
    FilesystemPort,
    delete_tree,
    ensure_dirs,
    ensure_dirs_for_file,
    link_directory,
    unlink_directory,
)
from dirkit.errors import DirkitError, FileSystemIOError, RefusedOverwriteError
from dirkit.platform.filesystem import LocalFileSystem
from dirkit.shared.types import EntryKind, Outcome

__all__ = [
    "DirkitError",
    "EntryKind",
    "FileSystemIOError",
    "FilesystemPort",
    "LocalFileSystem",
    "Outcome",
    "RefusedOverwriteError",
    "delete_tree",
    "ensure_dirs",
    "ensure_dirs_for_file",
    "link_directory",
    "unlink_directory",
]
