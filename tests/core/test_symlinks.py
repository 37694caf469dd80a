"""
Summary: Validate directory link creation, replacement and removal.
Why: Link maintenance must never overwrite real entries or touch link targets.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dirkit.core.symlinks import link_directory, unlink_directory
from dirkit.errors import FileSystemIOError, RefusedOverwriteError
from dirkit.shared.types import EntryKind, Outcome


@pytest.fixture
def targets(tmp_path: Path) -> tuple[Path, Path]:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _ = (first / "marker.txt").write_text("first")
    return first, second


def test_link_directory_creates_missing_link(tmp_path: Path, targets: tuple[Path, Path]) -> None:
    first, _ = targets
    link = tmp_path / "current"

    assert link_directory(link, first) is Outcome.CREATED
    assert link.is_symlink()
    assert Path(os.readlink(link)) == first
    assert (link / "marker.txt").read_text() == "first"


def test_link_directory_replaces_existing_link(tmp_path: Path, targets: tuple[Path, Path]) -> None:
    """A second call with a new target swaps the link."""

    first, second = targets
    link = tmp_path / "current"
    _ = link_directory(link, first)

    assert link_directory(link, second) is Outcome.REPLACED
    assert link.is_symlink()
    assert Path(os.readlink(link)) == second
    assert (first / "marker.txt").exists()


def test_link_directory_replaces_dangling_link(tmp_path: Path, targets: tuple[Path, Path]) -> None:
    _, second = targets
    link = tmp_path / "current"
    link.symlink_to(tmp_path / "gone", target_is_directory=True)

    assert link_directory(link, second) is Outcome.REPLACED
    assert Path(os.readlink(link)) == second


def test_link_directory_refuses_real_directory(tmp_path: Path, targets: tuple[Path, Path]) -> None:
    """A real directory at the link path is left untouched."""

    first, _ = targets
    occupied = tmp_path / "occupied"
    occupied.mkdir()
    _ = (occupied / "keep.txt").write_text("keep")

    with pytest.raises(RefusedOverwriteError) as excinfo:
        _ = link_directory(occupied, first)

    assert excinfo.value.path == occupied
    assert excinfo.value.target == first
    assert excinfo.value.__cause__ is None
    assert not occupied.is_symlink()
    assert (occupied / "keep.txt").read_text() == "keep"


def test_link_directory_refuses_regular_file(tmp_path: Path, targets: tuple[Path, Path]) -> None:
    first, _ = targets
    occupied = tmp_path / "occupied.txt"
    _ = occupied.write_text("keep")

    with pytest.raises(RefusedOverwriteError, match="is not a symbolic link"):
        _ = link_directory(occupied, first)

    assert occupied.read_text() == "keep"


def test_link_directory_wraps_io_failures(fs_port: MagicMock) -> None:
    """Underlying errors carry both paths and the original cause."""

    denied = PermissionError(13, "Permission denied")
    fs_port.probe_link_aware.return_value = EntryKind.SYMBOLIC_LINK
    fs_port.remove_file.side_effect = denied

    with pytest.raises(FileSystemIOError) as excinfo:
        _ = link_directory("/links/current", "/data/v2", filesystem=fs_port)

    error = excinfo.value
    assert error.__cause__ is denied
    assert error.paths == (Path("/links/current"), Path("/data/v2"))
    assert "Failed to create symbolic link from '/links/current' to '/data/v2'" in str(error)
    assert "Permission denied" in str(error)
    fs_port.create_symbolic_link.assert_not_called()
    fs_port.probe_following.assert_not_called()


def test_link_directory_passes_directory_hint(fs_port: MagicMock) -> None:
    fs_port.probe_link_aware.return_value = EntryKind.MISSING

    _ = link_directory("/links/current", "/data/v1", filesystem=fs_port)

    fs_port.create_symbolic_link.assert_called_once_with(
        Path("/links/current"), Path("/data/v1"), kind_hint="dir"
    )


def test_unlink_directory_missing_is_noop(tmp_path: Path) -> None:
    assert unlink_directory(tmp_path / "absent") is Outcome.NOOP


def test_unlink_directory_removes_link_only(tmp_path: Path, targets: tuple[Path, Path]) -> None:
    first, _ = targets
    link = tmp_path / "current"
    link.symlink_to(first, target_is_directory=True)

    assert unlink_directory(link) is Outcome.REMOVED
    assert not link.is_symlink()
    assert (first / "marker.txt").read_text() == "first"


def test_unlink_directory_refuses_real_directory(targets: tuple[Path, Path]) -> None:
    first, _ = targets

    with pytest.raises(RefusedOverwriteError, match="did not delete it"):
        _ = unlink_directory(first)

    assert (first / "marker.txt").exists()


def test_unlink_directory_wraps_io_failures(fs_port: MagicMock) -> None:
    fs_port.probe_link_aware.side_effect = PermissionError(13, "Permission denied")

    with pytest.raises(FileSystemIOError, match="Failed to delete the symbolic link"):
        _ = unlink_directory("/links/current", filesystem=fs_port)
