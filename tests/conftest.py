"""Global pytest fixtures and default marks for bloglikes."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
DATA_DIR = TESTS_ROOT / "fixtures" / "data"

# folder under tests/ -> marker added to every test collected below it
FOLDER_MARKERS = ("unit", "functional", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default folder mark (`unit`, `functional`, `e2e`) to each item."""
    for item in items:
        path = item.path.resolve()
        for name in FOLDER_MARKERS:
            if TESTS_ROOT / name in path.parents:
                if not any(marker.name == name for marker in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, name))


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the JSON user fixtures."""
    return DATA_DIR
