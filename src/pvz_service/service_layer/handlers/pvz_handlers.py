"""Handlers for registering pickup points."""

import logging
from collections.abc import Callable

from pvz_service.domain import rules
from pvz_service.domain.events import PVZCreated
from pvz_service.domain.models import PVZ
from pvz_service.interfaces.clock import Clock
from pvz_service.interfaces.id_generator import IdGenerator
from pvz_service.interfaces.metrics import MetricsRecorder
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
from pvz_service.service_layer import commands

logger = logging.getLogger(__name__)


def create_pvz(
    cmd: commands.CreatePVZ,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
    metrics: MetricsRecorder,
) -> PVZ:
    """Register a new pickup point in one of the supported cities."""

    city = rules.validate_city(cmd.city)
    pvz = PVZ(id=id_generator.new_id(), registration_date=clock.now(), city=city)

    with uow:
        uow.pvz.add(pvz)
        uow.commit()

    logger.info("PVZ created: id=%s, city=%s", pvz.id, city.value)
    metrics.record(PVZCreated(pvz_id=pvz.id, city=city.value))
    return pvz


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreatePVZ: create_pvz,
}
