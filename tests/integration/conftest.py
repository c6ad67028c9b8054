"""Mark every test under `tests/integration/` as `integration` unless it says otherwise."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

LAYER_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "integration"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the `integration` mark to items collected below this directory."""
    for item in items:
        if LAYER_ROOT not in item.path.resolve().parents:
            continue
        if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, MARKER_NAME))
