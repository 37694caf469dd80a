"""Filesystem adapter backed by the ``os`` module."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from dirkit.core.ports import FilesystemPort
from dirkit.shared.types import EntryKind

# Errors meaning "nothing is there": the entry is absent or a parent is not a directory.
_ABSENT_ERRORS: tuple[type[OSError], ...] = (FileNotFoundError, NotADirectoryError)


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMBOLIC_LINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.REGULAR_FILE


class LocalFileSystem(FilesystemPort):
    """Thin wrapper around the local filesystem."""

    def probe_link_aware(self, path: Path) -> EntryKind:
        try:
            return _kind_from_mode(os.lstat(path).st_mode)
        except _ABSENT_ERRORS:
            return EntryKind.MISSING

    def probe_following(self, path: Path) -> EntryKind:
        try:
            return _kind_from_mode(os.stat(path).st_mode)
        except _ABSENT_ERRORS:
            return EntryKind.MISSING

    def create_directory(self, path: Path) -> None:
        os.mkdir(path)

    def remove_directory(self, path: Path) -> None:
        os.rmdir(path)

    def list_children(self, path: Path) -> list[str]:
        return os.listdir(path)

    def create_symbolic_link(self, link_path: Path, target_path: Path, *, kind_hint: str = "dir") -> None:
        os.symlink(target_path, link_path, target_is_directory=kind_hint == "dir")

    def remove_file(self, path: Path) -> None:
        # Windows directory links are removed like directories.
        if os.name == "nt" and os.path.islink(path) and os.path.isdir(path):
            os.rmdir(path)
            return
        os.unlink(path)


_DEFAULT = LocalFileSystem()


def default_filesystem() -> LocalFileSystem:
    """Return the shared stateless local adapter."""

    return _DEFAULT


__all__ = ["LocalFileSystem", "default_filesystem"]
