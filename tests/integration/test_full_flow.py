"""End-to-end service flows through the bootstrap against real databases."""

import pytest

from pvz_service.adapters.metrics import PrometheusMetricsRecorder
from pvz_service.bootstrap import bootstrap
from pvz_service.domain.errors import (
    InvalidCredentials,
    NoActiveReception,
    NoOpenReception,
    ReceptionAlreadyOpen,
)
from pvz_service.domain.value_objects import ProductCategory, ReceptionStatus
from pvz_service.service_layer import commands

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["sqlite_url", "pg_url"])
def app(request):
    """An application container bootstrapped against each backend."""
    url = request.getfixturevalue(request.param)
    if request.param == "pg_url":
        # truncate through the engine fixture's teardown
        request.getfixturevalue("postgres_engine")
    return bootstrap(url, metrics=PrometheusMetricsRecorder())


def test_reception_lifecycle(app):
    """Create, open, add, remove, close, and read it all back."""
    bus = app.message_bus
    pvz = bus.handle(commands.CreatePVZ(city="Санкт-Петербург"))
    reception = bus.handle(commands.OpenReception(pvz_id=pvz.id))
    first = bus.handle(commands.AddProduct(pvz_id=pvz.id, category="одежда"))
    second = bus.handle(commands.AddProduct(pvz_id=pvz.id, category="обувь"))

    with pytest.raises(ReceptionAlreadyOpen):
        bus.handle(commands.OpenReception(pvz_id=pvz.id))

    bus.handle(commands.DeleteLastProduct(pvz_id=pvz.id))
    closed = bus.handle(commands.CloseReception(pvz_id=pvz.id))

    with pytest.raises(NoOpenReception):
        bus.handle(commands.CloseReception(pvz_id=pvz.id))
    with pytest.raises(NoActiveReception):
        bus.handle(commands.AddProduct(pvz_id=pvz.id, category="обувь"))

    assert closed.id == reception.id
    assert closed.status is ReceptionStatus.CLOSED

    (info,) = app.views.get_full_info()
    assert info.pvz == pvz
    (entry,) = info.receptions
    assert entry.reception.status is ReceptionStatus.CLOSED
    assert [p.id for p in entry.products] == [first.id]
    assert entry.products[0].category is ProductCategory.CLOTHING
    assert second.id != first.id

    registry = app.metrics.registry
    assert registry.get_sample_value("created_pvz_total") == 1.0
    assert registry.get_sample_value("created_receptions_total") == 1.0
    assert registry.get_sample_value("closed_receptions_total") == 1.0
    assert registry.get_sample_value("created_products_total") == 2.0
    assert registry.get_sample_value("deleted_products_total") == 1.0


def test_reopen_after_close(app):
    """A closed reception frees the PVZ for the next one."""
    bus = app.message_bus
    pvz = bus.handle(commands.CreatePVZ(city="Москва"))
    first = bus.handle(commands.OpenReception(pvz_id=pvz.id))
    bus.handle(commands.CloseReception(pvz_id=pvz.id))
    second = bus.handle(commands.OpenReception(pvz_id=pvz.id))

    assert second.id != first.id
    (info,) = app.views.get_full_info()
    assert [r.reception.id for r in info.receptions] == [first.id, second.id]


def test_register_and_login(app):
    """Stored credentials authenticate; wrong ones do not."""
    bus = app.message_bus
    user = bus.handle(
        commands.RegisterUser(email="mod@example.com", password="pw", role="moderator")
    )

    assert bus.handle(
        commands.AuthenticateUser(email="mod@example.com", password="pw")
    ) == user
    with pytest.raises(InvalidCredentials):
        bus.handle(commands.AuthenticateUser(email="mod@example.com", password="nope"))
