"""Reception lifecycle handlers.

A reception is created open (``in_progress``) and moves to closed exactly
once. At most one reception per PVZ may be open at any instant.
"""

import logging
from collections.abc import Callable

from pvz_service.domain.errors import (
    NoOpenReception,
    PVZNotFound,
    ReceptionAlreadyClosed,
    ReceptionAlreadyOpen,
)
from pvz_service.domain.events import ReceptionClosed, ReceptionCreated
from pvz_service.domain.models import Reception
from pvz_service.domain.value_objects import ReceptionStatus
from pvz_service.interfaces.clock import Clock
from pvz_service.interfaces.id_generator import IdGenerator
from pvz_service.interfaces.metrics import MetricsRecorder
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
from pvz_service.service_layer import commands

logger = logging.getLogger(__name__)


def open_reception(
    cmd: commands.OpenReception,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
    metrics: MetricsRecorder,
) -> Reception:
    """Open a new reception at a PVZ that has none in progress."""

    with uow:
        if not uow.pvz.exists(cmd.pvz_id):
            raise PVZNotFound(cmd.pvz_id)

        if uow.receptions.has_open(cmd.pvz_id):
            raise ReceptionAlreadyOpen(cmd.pvz_id)

        now = clock.now()
        reception = Reception(
            id=id_generator.new_id(),
            date_time=now,
            pvz_id=cmd.pvz_id,
            status=ReceptionStatus.IN_PROGRESS,
            created_at=now,
        )
        # the storage layer re-checks the single-open rule on insert
        uow.receptions.add(reception)
        uow.commit()

    logger.info("Reception created: id=%s, pvz=%s", reception.id, reception.pvz_id)
    metrics.record(ReceptionCreated(reception_id=reception.id, pvz_id=reception.pvz_id))
    return reception


def close_reception(
    cmd: commands.CloseReception,
    uow: AbstractUnitOfWork,
    clock: Clock,
    metrics: MetricsRecorder,
) -> Reception:
    """Close the open reception of a PVZ.

    The close is a conditional update guarded by "still open"; if it affects
    no record, a concurrent closer got there first and the call fails instead
    of reporting a second success.
    """

    with uow:
        reception = uow.receptions.get_open(cmd.pvz_id)
        if reception is None:
            raise NoOpenReception(cmd.pvz_id)

        closed_at = clock.now()
        if uow.receptions.close_by_id(reception.id, closed_at) == 0:
            raise ReceptionAlreadyClosed(reception.id)

        closed = reception.close(closed_at)
        uow.commit()

    logger.info("Reception closed: id=%s, pvz=%s", closed.id, closed.pvz_id)
    metrics.record(ReceptionClosed(reception_id=closed.id, pvz_id=closed.pvz_id))
    return closed


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.OpenReception: open_reception,
    commands.CloseReception: close_reception,
}
