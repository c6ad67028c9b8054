"""Tests for the bootstrap wiring."""

from collections.abc import Callable

import pytest

from pvz_service.adapters.clock import FixedStepClock
from pvz_service.adapters.id_generators import SimpleIdGenerator
from pvz_service.adapters.metrics import InMemoryMetricsRecorder
from pvz_service.adapters.unit_of_work import SqlAlchemyUnitOfWork
from pvz_service.bootstrap import (
    bootstrap,
    build_message_bus,
    build_read_uow,
    build_write_uow,
    inject_dependencies,
)
from pvz_service.config import DatabaseUrlNotSetError
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
from pvz_service.service_layer import commands
from pvz_service.service_layer.commands import Command
from pvz_service.service_layer.handlers import PRODUCT_COMMAND_HANDLERS

# pylint: disable=unused-argument
# pylint: disable=too-few-public-methods


class FakeUnitOfWork(AbstractUnitOfWork):
    """A unit of work that only records commits."""

    def __init__(self):
        self.committed = False

    def commit(self):
        self.committed = True

    def rollback(self):
        pass


class CustomCommand(Command):
    """A command no production handler knows about."""


class TestBuildUoW:
    """Tests for the unit of work builders."""

    @staticmethod
    def test_write_uow_uses_default_isolation(sqlite_engine_memory):
        """Write units keep the engine's isolation level."""
        uow = build_write_uow(sqlite_engine_memory)
        assert isinstance(uow, SqlAlchemyUnitOfWork)
        assert uow.engine is sqlite_engine_memory
        assert uow.execution_options == {}

    @staticmethod
    def test_read_uow_shares_the_engine(sqlite_engine_memory):
        """Read units run on the same engine as writes."""
        uow = build_read_uow(sqlite_engine_memory)
        assert isinstance(uow, SqlAlchemyUnitOfWork)
        assert uow.engine is sqlite_engine_memory


class TestBuildMessageBus:
    """Tests for the build_message_bus function."""

    @staticmethod
    def test_injects_declared_dependencies_only():
        """Handlers receive exactly the collaborators they name."""
        uow = FakeUnitOfWork()
        clock = FixedStepClock()
        seen = {}

        def sample_handler(cmd: CustomCommand, uow, clock):
            seen.update(uow=uow, clock=clock)
            with uow:
                uow.commit()
            return "handled"

        handlers: dict[type[Command], Callable[..., object]] = {
            CustomCommand: sample_handler
        }
        bus = build_message_bus(uow, handlers, clock=clock)

        assert bus.handle(CustomCommand()) == "handled"
        assert seen == {"uow": uow, "clock": clock}
        assert bus.uow.committed is True

    @staticmethod
    def test_capability_subset():
        """A bus built from one capability set knows nothing else."""
        bus = build_message_bus(FakeUnitOfWork(), PRODUCT_COMMAND_HANDLERS)
        assert bus.handles(commands.AddProduct)
        assert bus.handles(commands.DeleteLastProduct)
        assert not bus.handles(commands.CreatePVZ)
        assert not bus.handles(commands.OpenReception)


def test_inject_dependencies_ignores_unknown_names():
    """Dependencies a handler does not declare are not bound."""

    def handler(cmd, id_generator):
        return id_generator

    generator = SimpleIdGenerator()
    bound = inject_dependencies(handler, {"id_generator": generator, "clock": None})
    assert bound(object()) is generator


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_uses_env_url(monkeypatch, sqlite_url):
        """Without an explicit URL the PVZ_DB_URL variable is used."""
        monkeypatch.setenv("PVZ_DB_URL", sqlite_url)
        app = bootstrap()
        assert isinstance(app.message_bus.uow, SqlAlchemyUnitOfWork)
        assert str(app.message_bus.uow.engine.url) == sqlite_url
        assert app.views.list_all() == []

    @staticmethod
    def test_missing_env_url(monkeypatch):
        """With neither argument nor environment the URL error surfaces."""
        monkeypatch.delenv("PVZ_DB_URL", raising=False)
        with pytest.raises(DatabaseUrlNotSetError):
            bootstrap()

    @staticmethod
    def test_metrics_recorder_is_shared(sqlite_url):
        """The recorder handed in is the one the handlers feed."""
        metrics = InMemoryMetricsRecorder()
        app = bootstrap(sqlite_url, metrics=metrics)

        app.message_bus.handle(commands.CreatePVZ(city="Казань"))

        assert app.metrics is metrics
        assert metrics.names() == ["PVZCreated"]
