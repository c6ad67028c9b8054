"""`pvz product` commands: add and remove products in the open reception."""

import click
import click_extra as clickx

from pvz_service.domain.value_objects import ProductCategory
from pvz_service.service_layer import commands

from .app import load_app, reported_errors
from .helpers import echo_json, success
from .helpers.presenters import product_to_dict


@click.group(cls=clickx.ExtraGroup)
def product() -> None:
    """Product commands."""


@product.command()
@click.argument("pvz_id")
@click.option(
    "--category",
    "--type",
    "category",
    required=True,
    help=f"Product category ({', '.join(c.value for c in ProductCategory)}).",
)
def add(pvz_id: str, category: str) -> None:
    """Add a product to the open reception at PVZ_ID."""
    app = load_app()
    with reported_errors():
        added = app.message_bus.handle(
            commands.AddProduct(pvz_id=pvz_id, category=category)
        )
    echo_json(product_to_dict(added))


@product.command(name="remove-last")
@click.argument("pvz_id")
def remove_last(pvz_id: str) -> None:
    """Remove the most recently added product of the open reception at PVZ_ID."""
    app = load_app()
    with reported_errors():
        app.message_bus.handle(commands.DeleteLastProduct(pvz_id=pvz_id))
    success("Last product removed.")
