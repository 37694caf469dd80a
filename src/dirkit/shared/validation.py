"""Argument checks shared by the public operations."""

from __future__ import annotations

import os
from pathlib import Path


def require_path(value: str | os.PathLike[str] | None, name: str) -> Path:
    """Return ``value`` as a ``Path`` or raise ``ValueError`` when it is blank."""

    if value is None:
        raise ValueError(f"Expected '{name}' to be a path, got None")
    raw = os.fspath(value)
    if not raw.strip():
        raise ValueError(f"Expected '{name}' to be a non-blank path")
    return Path(raw)


__all__ = ["require_path"]
