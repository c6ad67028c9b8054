"""Default marks for tests under `tests/functional/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the `functional` mark to items collected below this directory."""
    for item in items:
        if FUNCTIONAL_ROOT not in item.path.resolve().parents:
            continue
        if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, MARKER_NAME))


@pytest.fixture
def empty_sqlite_url(tmp_path: Path) -> str:
    """URL of a SQLite file that has never been migrated."""
    return f"sqlite:///{tmp_path / 'pvz.db'}"


@pytest.fixture
def log_env(tmp_path: Path) -> dict[str, str]:
    """Keep the flight recorder file inside the test's temporary directory."""
    return {"PVZ_LOG_PATH": str(tmp_path / "pvz.log")}
