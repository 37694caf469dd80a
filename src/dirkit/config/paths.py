"""Location of the dirkit configuration file.

Policy:
- ``DIRKIT_CONFIG_PATH`` wins when set.
- Inside a source checkout (a parent holding ``pyproject.toml`` or ``.git``),
  ``<checkout>/config/dirkit.toml``.
- Otherwise, for an installed package, ``~/.config/dirkit/dirkit.toml``.
  The working directory is never consulted.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_PATH: Final[str] = "DIRKIT_CONFIG_PATH"
_CONFIG_FILE_NAME: Final[str] = "dirkit.toml"
_CHECKOUT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Return the first of ``explicit_path``, ``env[env_var]`` or the default, resolved.

    Blank environment values count as unset.
    """
    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(env_var) or "").strip() if env_var else ""
    if candidate:
        return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path | None:
    """Return the source checkout containing ``start``, or ``None`` when installed."""

    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _CHECKOUT_MARKERS):
            return candidate
    return None


def _default_config_location() -> Path:
    repo_root = _detect_repo_root()
    if repo_root is not None:
        return repo_root / "config" / _CONFIG_FILE_NAME
    return Path.home() / ".config" / "dirkit" / _CONFIG_FILE_NAME


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file (see the module policy)."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=_default_config_location,
    )


__all__ = [
    "default_config_path",
    "resolve_overridable_path",
]
