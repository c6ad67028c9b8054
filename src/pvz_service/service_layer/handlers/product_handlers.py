"""Product ledger handlers.

Products are appended to, and removed from, the open reception of a PVZ only.
Removal is LIFO: always the most recently added product.
"""

import logging
from collections.abc import Callable

from pvz_service.domain import rules
from pvz_service.domain.errors import (
    NoActiveReception,
    NoOpenReception,
    NoProductsToDelete,
)
from pvz_service.domain.events import ProductAdded, ProductRemoved
from pvz_service.domain.models import Product
from pvz_service.interfaces.clock import Clock
from pvz_service.interfaces.id_generator import IdGenerator
from pvz_service.interfaces.metrics import MetricsRecorder
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
from pvz_service.service_layer import commands

logger = logging.getLogger(__name__)


def add_product(
    cmd: commands.AddProduct,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
    metrics: MetricsRecorder,
) -> Product:
    """Record a product against the open reception of a PVZ."""

    category = rules.validate_product_category(cmd.category)

    with uow:
        reception = uow.receptions.get_open(cmd.pvz_id)
        if reception is None:
            raise NoActiveReception(cmd.pvz_id)

        product = Product(
            id=id_generator.new_id(),
            date_time=clock.now(),
            category=category,
            reception_id=reception.id,
        )
        uow.products.add(product)
        uow.commit()

    logger.info(
        "Product added: id=%s, type=%s, reception=%s, pvz=%s",
        product.id,
        category.value,
        reception.id,
        cmd.pvz_id,
    )
    metrics.record(
        ProductAdded(
            product_id=product.id,
            reception_id=reception.id,
            category=category.value,
        )
    )
    return product


def delete_last_product(
    cmd: commands.DeleteLastProduct,
    uow: AbstractUnitOfWork,
    metrics: MetricsRecorder,
) -> None:
    """Remove the most recently added product of the open reception of a PVZ."""

    with uow:
        reception = uow.receptions.get_open(cmd.pvz_id)
        if reception is None:
            raise NoOpenReception(cmd.pvz_id)

        product_id = uow.products.delete_last(reception.id)
        if product_id is None:
            raise NoProductsToDelete(reception.id)

        uow.commit()

    logger.info("Product deleted: id=%s, reception=%s", product_id, reception.id)
    metrics.record(ProductRemoved(product_id=product_id, reception_id=reception.id))


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.AddProduct: add_product,
    commands.DeleteLastProduct: delete_last_product,
}
