"""`pvz reception` commands: open and close intake batches."""

import click
import click_extra as clickx

from pvz_service.service_layer import commands

from .app import load_app, reported_errors
from .helpers import echo_json, success
from .helpers.presenters import reception_to_dict


@click.group(cls=clickx.ExtraGroup)
def reception() -> None:
    """Reception commands."""


@reception.command(name="open")
@click.argument("pvz_id")
def open_(pvz_id: str) -> None:
    """Open a reception at PVZ_ID."""
    app = load_app()
    with reported_errors():
        opened = app.message_bus.handle(commands.OpenReception(pvz_id=pvz_id))
    echo_json(reception_to_dict(opened))


@reception.command()
@click.argument("pvz_id")
def close(pvz_id: str) -> None:
    """Close the reception in progress at PVZ_ID."""
    app = load_app()
    with reported_errors():
        closed = app.message_bus.handle(commands.CloseReception(pvz_id=pvz_id))
    echo_json(reception_to_dict(closed))
    success(f"Reception {closed.id} closed.")
