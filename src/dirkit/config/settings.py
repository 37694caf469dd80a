"""Where: src/dirkit/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to other layers without file I/O.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from dirkit.config.config import config as app_config

LOG_FILE: Path | None = app_config.log_file

LOG_CONSOLE_LEVEL: int = app_config.level_for(app_config.console_level, logging.INFO)
LOG_FILE_LEVEL: int = app_config.level_for(app_config.file_level, logging.DEBUG)

_DEFAULT_ENCODING = "utf-8"


def _validated_encoding(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError:
        return _DEFAULT_ENCODING


TEXT_ENCODING: str = _validated_encoding(app_config.text_encoding or _DEFAULT_ENCODING)


__all__ = [
    "LOG_FILE",
    "LOG_CONSOLE_LEVEL",
    "LOG_FILE_LEVEL",
    "TEXT_ENCODING",
]
