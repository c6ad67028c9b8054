"""Global pytest fixtures for the PVZ service."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
]


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Route to an engine-providing fixture named by indirect parametrization.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["sqlite_engine_file", "postgres_engine"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
