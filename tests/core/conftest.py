"""Shared fixtures for core operation tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from dirkit.core.ports import FilesystemPort


@pytest.fixture
def fs_port(mocker: MockerFixture) -> MagicMock:
    """Provide an autospecced filesystem port for injecting failures."""

    return mocker.create_autospec(FilesystemPort, instance=True)
