"""Fixtures for end-to-end runs of the ``bloglikes`` command.

Every test gets a CliRunner and, through ``users_file``, an isolated working
directory holding a copy of the JSON users fixture.
"""

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def users_file(fs, data_dir) -> Path:
    """Copy of the users fixture in the isolated working directory."""
    return Path(shutil.copy(data_dir / "users.json", "users.json"))
