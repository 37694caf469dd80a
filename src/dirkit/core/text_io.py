"""Pass-through file I/O wrappers used alongside the tree operations."""

from __future__ import annotations

import json
import os
import stat
from pathlib import Path
from typing import Any

from dirkit.config.settings import TEXT_ENCODING
from dirkit.shared.validation import require_path

PathArg = str | os.PathLike[str]


def exists(path: PathArg) -> bool:
    """Return True when ``path`` exists, following symbolic links."""

    return require_path(path, "path").exists()


def is_dir(path: PathArg) -> bool:
    """Return True when ``path`` is a directory; raises if it does not exist."""

    return stat.S_ISDIR(require_path(path, "path").stat().st_mode)


def read_all(path: PathArg, *, normalize_newlines: bool = False, binary: bool = False) -> bytes:
    """Read the whole of ``path``.

    In text mode the content round-trips through the configured encoding and,
    when ``normalize_newlines`` is set, Windows line endings become ``\\n``.
    ``normalize_newlines`` is ignored in binary mode.
    """
    target = require_path(path, "path")
    if binary:
        return target.read_bytes()

    content = target.read_bytes().decode(TEXT_ENCODING)
    if normalize_newlines:
        content = content.replace("\r\n", "\n")
    return content.encode(TEXT_ENCODING)


def write_all(path: PathArg, content: bytes) -> None:
    """Replace the contents of ``path`` with ``content``."""

    if content is None:
        raise ValueError("Content to write to the file must not be None")
    _ = require_path(path, "path").write_bytes(content)


def create_file(path: PathArg) -> None:
    """Create ``path`` as an empty file, truncating any existing content."""

    with open(require_path(path, "path"), "wb"):
        pass


def write_object(path: PathArg, obj: Any) -> None:
    """Serialise ``obj`` as indented JSON into ``path``."""

    if obj is None:
        raise ValueError("Object to write must not be None")
    text = json.dumps(obj, indent=2)
    _ = require_path(path, "path").write_text(text, encoding=TEXT_ENCODING)


def delete_file(path: PathArg) -> None:
    """Delete ``path`` if it exists."""

    require_path(path, "path").unlink(missing_ok=True)


def delete_dir(path: PathArg) -> None:
    """Remove the empty directory ``path``."""

    require_path(path, "path").rmdir()


__all__ = [
    "create_file",
    "delete_dir",
    "delete_file",
    "exists",
    "is_dir",
    "read_all",
    "write_all",
    "write_object",
]
