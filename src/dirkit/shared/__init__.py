"""Shared value types used across dirkit layers."""

from .types import EntryKind, FsEvent, Outcome
from .validation import require_path

__all__ = ["EntryKind", "FsEvent", "Outcome", "require_path"]
