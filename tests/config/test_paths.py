"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from dirkit.config.paths import _detect_repo_root, default_config_path, resolve_overridable_path


def test_default_config_path_uses_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == portable_repo_root / "config" / "dirkit.toml"


def test_default_config_path_honours_environment(portable_repo_root: Path) -> None:
    override = portable_repo_root / "elsewhere" / "custom.toml"

    assert default_config_path(env={"DIRKIT_CONFIG_PATH": f"  {override}  "}) == override


def test_installed_package_uses_home_config_not_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Outside a checkout the working directory is ignored."""

    import dirkit.config.paths as paths

    home = tmp_path / "home"
    workdir = tmp_path / "work"
    home.mkdir()
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    monkeypatch.setattr(paths, "_detect_repo_root", lambda _start=None: None, raising=True)

    assert default_config_path(env={}) == home / ".config" / "dirkit" / "dirkit.toml"


def test_detect_repo_root_without_markers_returns_none(tmp_path: Path) -> None:
    nested = tmp_path / "site-packages" / "dirkit" / "config"
    nested.mkdir(parents=True)

    # tmp_path itself may sit below a checkout; only assert when it does not.
    if any((p / "pyproject.toml").exists() or (p / ".git").exists() for p in [tmp_path, *tmp_path.parents]):
        pytest.skip("temporary directory lives inside a checkout")
    assert _detect_repo_root(nested / "paths.py") is None


def test_detect_repo_root_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    nested = tmp_path / "src" / "dirkit" / "config"
    nested.mkdir(parents=True)

    assert _detect_repo_root(nested / "paths.py") == tmp_path


def test_explicit_path_beats_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"SOME_VAR": str(tmp_path / "env.toml")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit
