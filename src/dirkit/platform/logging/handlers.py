"""Rich console handler for structured filesystem events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FsEventRichHandler(RichHandler):
    """Rich handler that renders ``fs_event`` records with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "fs.directory.create": ("📁", "cyan", "Created directory "),
        "fs.link.create": ("🔗", "green", "Linked "),
        "fs.link.replace": ("🔁", "green", "Relinked "),
        "fs.link.remove": ("✂️", "yellow", "Unlinked "),
        "fs.link.refused": ("🛑", "red", "Refused to overwrite "),
        "fs.tree.delete": ("🗑️", "magenta", "Deleted tree "),
        "fs.tree.noop": ("ℹ️", "blue", "Nothing to delete at "),
        "fs.operation.error": ("⛔", "red", "Failed "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping only the last segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Styled path with an ellipsis when leading segments were dropped.
        """
        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render a structured filesystem event, or ``None`` for plain records."""

        event = getattr(record, "fs_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        path = getattr(record, "path", None)
        target = getattr(record, "target", None)
        if path is None:
            _ = body.append(message)
        else:
            _ = body.append(prefix)
            _ = body.append_text(self._format_path(str(path)))
            if target is not None:
                _ = body.append(" → ")
                _ = body.append_text(self._format_path(str(target)))

        if event == "fs.operation.error":
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        elif event == "fs.tree.delete":
            removed = getattr(record, "removed_entries", None)
            if isinstance(removed, int):
                _ = body.append(f" [entries={removed}]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["FsEventRichHandler"]
