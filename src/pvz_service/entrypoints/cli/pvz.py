"""`pvz pvz` commands: register pickup points and read the nested view."""

from __future__ import annotations

import click
import click_extra as clickx

from pvz_service.domain.value_objects import City
from pvz_service.service_layer import commands
from pvz_service.service_layer.views import DEFAULT_LIMIT, DEFAULT_PAGE

from .app import load_app, parse_timestamp, reported_errors
from .helpers import echo_json
from .helpers.presenters import full_info_to_list, pvz_to_dict

MAX_PAGE_LIMIT = 30


@click.group(name="pvz", cls=clickx.ExtraGroup)
def pvz_group() -> None:
    """Pickup point commands."""


@pvz_group.command()
@click.option(
    "--city",
    required=True,
    help=f"City of the pickup point ({', '.join(c.value for c in City)}).",
)
def create(city: str) -> None:
    """Register a new pickup point."""
    app = load_app()
    with reported_errors():
        pvz = app.message_bus.handle(commands.CreatePVZ(city=city))
    echo_json(pvz_to_dict(pvz))


@pvz_group.command(name="list")
def list_() -> None:
    """List every pickup point, newest first."""
    app = load_app()
    with reported_errors():
        pvz_list = app.views.list_all()
    echo_json([pvz_to_dict(p) for p in pvz_list])


@pvz_group.command()
@click.option(
    "--start",
    "start_date",
    callback=parse_timestamp,
    help="Only receptions at or after this ISO-8601 timestamp.",
)
@click.option(
    "--end",
    "end_date",
    callback=parse_timestamp,
    help="Only receptions at or before this ISO-8601 timestamp.",
)
@click.option(
    "--page",
    type=click.IntRange(min=1),
    default=DEFAULT_PAGE,
    show_default=True,
    help="1-based page of pickup points.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1, max=MAX_PAGE_LIMIT),
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Pickup points per page.",
)
def info(start_date, end_date, page: int, limit: int) -> None:
    """Show pickup points with their receptions and products."""
    app = load_app()
    with reported_errors():
        result = app.views.get_full_info(
            start_date=start_date, end_date=end_date, page=page, limit=limit
        )
    echo_json(full_info_to_list(result))
