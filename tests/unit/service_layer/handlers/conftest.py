"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from pvz_service.adapters.metrics import InMemoryMetricsRecorder

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from pvz_service.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus_params():
    """Default bus parameters. Test classes can override this fixture."""
    return {}


@pytest.fixture
def metrics_recorder() -> InMemoryMetricsRecorder:
    """Recorder injected into the test bus's handlers."""
    return InMemoryMetricsRecorder()


@pytest.fixture
def make_test_bus(bus_params, metrics_recorder) -> Callable[[], MessageBus]:
    """Factory for a message bus over in-memory repositories."""

    def _make():
        return bootstrap_test_bus(metrics=metrics_recorder, **bus_params)

    return _make
