"""Summary: Port describing the filesystem calls the core operations rely on.
Why: Decouple the operations from ``os`` so tests can inject failing adapters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from dirkit.shared.types import EntryKind


@runtime_checkable
class FilesystemPort(Protocol):
    """Minimal filesystem surface used by cascade creation, linking and deletion."""

    def probe_link_aware(self, path: Path) -> EntryKind:
        """Report the kind of ``path`` itself, never following a final symlink."""
        ...

    def probe_following(self, path: Path) -> EntryKind:
        """Report the kind of the entry ``path`` resolves to; never a symlink."""
        ...

    def create_directory(self, path: Path) -> None:
        """Create a single directory; its parent must exist."""
        ...

    def remove_directory(self, path: Path) -> None:
        """Remove an empty directory."""
        ...

    def list_children(self, path: Path) -> list[str]:
        """Return the names of the immediate entries within ``path``."""
        ...

    def create_symbolic_link(self, link_path: Path, target_path: Path, *, kind_hint: str = "dir") -> None:
        """Create ``link_path`` pointing at ``target_path``."""
        ...

    def remove_file(self, path: Path) -> None:
        """Unlink a regular file or a symbolic link."""
        ...


__all__ = ["FilesystemPort"]
