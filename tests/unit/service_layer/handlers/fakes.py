"""Fake implementations for testing service layer handlers."""

from __future__ import annotations

from datetime import timedelta

from pvz_service.adapters.clock import FixedStepClock
from pvz_service.adapters.id_generators import SimpleIdGenerator
from pvz_service.adapters.metrics import InMemoryMetricsRecorder
from pvz_service.adapters.password_hasher import BcryptPasswordHasher, MIN_ROUNDS
from pvz_service.adapters.repositories import (
    InMemoryProductRepository,
    InMemoryPVZRepository,
    InMemoryReceptionRepository,
    InMemoryStoreData,
    InMemoryUserRepository,
)
from pvz_service.bootstrap.bootstrap import build_message_bus
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
from pvz_service.service_layer.handlers import COMMAND_HANDLERS
from pvz_service.service_layer.messagebus import MessageBus


class FakeUoW(AbstractUnitOfWork):
    """Unit of work over in-memory repositories with real rollback.

    Entering takes a snapshot of the store; rollback restores it, so work
    that was not committed disappears just as it would in a database.
    """

    def __init__(self, data: InMemoryStoreData | None = None):
        self.data = data if data is not None else InMemoryStoreData()
        self.pvz = InMemoryPVZRepository(self.data)
        self.receptions = InMemoryReceptionRepository(self.data)
        self.products = InMemoryProductRepository(self.data)
        self.users = InMemoryUserRepository(self.data)
        self.committed = False
        self.rollbacks = 0
        self._snapshot: InMemoryStoreData | None = None

    def __enter__(self):
        self._snapshot = self.data.snapshot()
        return super().__enter__()

    def commit(self):
        self._snapshot = self.data.snapshot()
        self.committed = True

    def rollback(self):
        self.rollbacks += 1
        if self._snapshot is not None:
            self.data.restore(self._snapshot)


def bootstrap_test_bus(
    command_handlers=None,
    step: timedelta = timedelta(seconds=1),
    metrics: InMemoryMetricsRecorder | None = None,
) -> MessageBus:
    """Bootstrap a message bus over a `FakeUoW` with deterministic collaborators."""
    return build_message_bus(
        FakeUoW(),
        COMMAND_HANDLERS if command_handlers is None else command_handlers,
        id_generator=SimpleIdGenerator(),
        clock=FixedStepClock(step=step),
        metrics=InMemoryMetricsRecorder() if metrics is None else metrics,
        password_hasher=BcryptPasswordHasher(rounds=MIN_ROUNDS),
    )
