"""src/dirkit/shared/types.py
Where: Shared layer.
What: Enums describing filesystem entry kinds, operation outcomes and log events.
Why: Keep the operation modules free of type boilerplate.
"""

from __future__ import annotations

from enum import StrEnum


class EntryKind(StrEnum):
    """Kind of a filesystem entry as reported by a status probe."""

    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"
    SYMBOLIC_LINK = "symbolic_link"
    MISSING = "missing"


class Outcome(StrEnum):
    """Result of a link or deletion operation that completed without error."""

    CREATED = "created"
    REPLACED = "replaced"
    REMOVED = "removed"
    NOOP = "noop"


class FsEvent(StrEnum):
    """Structured event identifiers for filesystem operation logs."""

    DIRECTORY_CREATE = "fs.directory.create"
    LINK_CREATE = "fs.link.create"
    LINK_REPLACE = "fs.link.replace"
    LINK_REMOVE = "fs.link.remove"
    LINK_REFUSED = "fs.link.refused"
    TREE_DELETE = "fs.tree.delete"
    TREE_NOOP = "fs.tree.noop"
    OPERATION_ERROR = "fs.operation.error"


__all__ = ["EntryKind", "FsEvent", "Outcome"]
