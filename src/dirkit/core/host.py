"""Where: src/dirkit/core/host.py
What: Platform-keyed lookups for newline conventions, file extensions and editors.
Why: Keep host-dependent text handling pure so it can be tested for any platform.
"""

from __future__ import annotations

import re
import sys
from typing import Final

OS_WIN32: Final[str] = "win32"
OS_MAC: Final[str] = "darwin"
OS_LINUX: Final[str] = "linux"

_DEFAULT_EDITORS: Final[dict[str, str]] = {
    OS_WIN32: "notepad",
    OS_MAC: "open -a TextEdit",
    OS_LINUX: "gedit",
}

# A newline not already preceded by a carriage return.
_LONE_NEWLINE: Final[re.Pattern[str]] = re.compile(r"(?<!\r)\n")


def normalize_extension(extension: str) -> str:
    """Return ``extension`` trimmed and prefixed with ``.`` (``"bin"`` -> ``".bin"``)."""

    if extension is None:
        raise ValueError("Expected 'extension' to be a string, got None")
    extension = extension.strip()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def process_newlines(original: str, platform: str | None = None) -> str:
    """Convert ``\\n`` line endings to ``\\r\\n`` on Windows; identity elsewhere."""

    if original is None:
        raise ValueError("Required parameter 'original' must not be None")
    if (platform or sys.platform) != OS_WIN32:
        return original
    return _LONE_NEWLINE.sub("\r\n", original)


def default_text_editor(platform: str | None = None) -> str | None:
    """Return the launch command of the usual text editor for ``platform``."""

    key = platform or sys.platform
    if key.startswith(OS_LINUX):
        key = OS_LINUX
    return _DEFAULT_EDITORS.get(key)


__all__ = [
    "OS_LINUX",
    "OS_MAC",
    "OS_WIN32",
    "default_text_editor",
    "normalize_extension",
    "process_newlines",
]
