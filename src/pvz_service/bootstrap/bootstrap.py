"""Bootstrap the message bus and read views with their adapters."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from pvz_service import config
from pvz_service.adapters.clock import SystemClock
from pvz_service.adapters.db.engine import make_engine, snapshot_execution_options
from pvz_service.adapters.id_generators import ULIDGenerator
from pvz_service.adapters.metrics import PrometheusMetricsRecorder
from pvz_service.adapters.password_hasher import BcryptPasswordHasher
from pvz_service.adapters.unit_of_work import SqlAlchemyUnitOfWork
from pvz_service.service_layer.handlers import COMMAND_HANDLERS
from pvz_service.service_layer.messagebus import MessageBus
from pvz_service.service_layer.views import PVZViews

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from pvz_service.interfaces.clock import Clock
    from pvz_service.interfaces.id_generator import IdGenerator
    from pvz_service.interfaces.metrics import MetricsRecorder
    from pvz_service.interfaces.password_hasher import PasswordHasher
    from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
    from pvz_service.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """The assembled application: one field per entry surface."""

    message_bus: MessageBus
    views: PVZViews
    metrics: MetricsRecorder


def build_write_uow(engine: Engine) -> AbstractUnitOfWork:
    """Build a unit of work for state-changing use cases."""
    return SqlAlchemyUnitOfWork(engine)


def build_read_uow(engine: Engine) -> AbstractUnitOfWork:
    """Build a unit of work whose reads share one snapshot."""
    return SqlAlchemyUnitOfWork(
        engine, execution_options=snapshot_execution_options(engine)
    )


def build_message_bus(  # pylint: disable=too-many-arguments
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    *,
    id_generator: IdGenerator | None = None,
    clock: Clock | None = None,
    metrics: MetricsRecorder | None = None,
    password_hasher: PasswordHasher | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies.

    Pass a subset of the handlers (e.g. `PRODUCT_COMMAND_HANDLERS`) to get a
    bus limited to that capability set. Missing collaborators fall back to
    the production adapters.
    """
    dependencies = {
        "uow": uow,
        "id_generator": ULIDGenerator() if id_generator is None else id_generator,
        "clock": SystemClock() if clock is None else clock,
        "metrics": PrometheusMetricsRecorder() if metrics is None else metrics,
        "password_hasher": (
            BcryptPasswordHasher() if password_hasher is None else password_hasher
        ),
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(uow, command_handlers=injected_command_handlers)


def bootstrap(
    db_url: str | None = None, metrics: MetricsRecorder | None = None
) -> AppContainer:
    """Assemble the application against the configured database.

    Args:
        db_url: Database URL; defaults to `PVZ_DB_URL`.
        metrics: Metrics recorder shared by all handlers; defaults to a
            Prometheus recorder with its own registry. Nothing here serves
            that registry: a long-running host exports
            `container.metrics.registry` itself, e.g. through
            `prometheus_client.make_wsgi_app(registry)`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and `PVZ_DB_URL` is unset.
    """
    engine = make_engine(db_url or config.get_db_url())
    if metrics is None:
        metrics = PrometheusMetricsRecorder()
    message_bus = build_message_bus(
        build_write_uow(engine), COMMAND_HANDLERS, metrics=metrics
    )
    return AppContainer(
        message_bus=message_bus,
        views=PVZViews(build_read_uow(engine)),
        metrics=metrics,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler declares (by parameter name) to it."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
