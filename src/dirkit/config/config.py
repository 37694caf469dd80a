"""Configuration management for dirkit."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from dirkit.config.paths import default_config_path

_log = logging.getLogger(__name__)

_LEVEL_NAMES: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    # Level names understood by ``logging``
    console_level: str = "INFO"
    file_level: str = "DEBUG"

    # Encoding used by the text I/O wrappers
    text_encoding: str = "utf-8"

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and normalise level names."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.console_level = str(self.console_level).strip().upper()
        self.file_level = str(self.file_level).strip().upper()

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` (the default config path when omitted)."""

        from dirkit.core.cascade import ensure_dirs_for_file
        from dirkit.core.text_io import write_all

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target if target is not None else default_config_path()
        try:
            content = self._render_toml(config_dict)
            _ = ensure_dirs_for_file(destination)
            write_all(destination, content.encode("utf-8"))
            _log.info("Configuration saved to %s", destination)
        except Exception as e:
            _log.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# dirkit configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Rotating log of filesystem operations; console only when unset")
        lines.append('# Example: log_file = "/path/to/logs/dirkit.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Log levels: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append(f"file_level = {self._format_toml_value(config['file_level'])}")
        lines.append("")

        lines.append("# Encoding used when reading and writing text files")
        lines.append(f"text_encoding = {self._format_toml_value(config['text_encoding'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    def level_for(self, name: str, fallback: int) -> int:
        """Translate a configured level name into a ``logging`` constant."""

        if name in _LEVEL_NAMES:
            return logging.getLevelNamesMapping()[name]
        return fallback

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from ``source`` or the default config path.

        A missing file yields defaults; nothing is written to disk.
        """
        if source is None and cls._instance is not None:
            return cls._instance

        config_file = source if source is not None else default_config_path()

        if not config_file.exists():
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                _log.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                _log.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            _log.info("Configuration loaded from %s", config_file)

        if source is None:
            cls._instance = instance
        return instance


# Global configuration instance
config = Config.load()
