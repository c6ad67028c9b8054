"""JSON presentation of domain objects for the `pvz` CLI.

Field names follow the service's public JSON API (camelCase, timestamps in
ISO-8601 UTC). Password hashes are never rendered.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

import click

from pvz_service.domain.models import (
    PVZ,
    FullPVZInfo,
    Product,
    Reception,
    ReceptionWithProducts,
    User,
)


def _timestamp(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def pvz_to_dict(pvz: PVZ) -> dict[str, Any]:
    return {
        "id": pvz.id,
        "registrationDate": _timestamp(pvz.registration_date),
        "city": pvz.city.value,
    }


def reception_to_dict(reception: Reception) -> dict[str, Any]:
    return {
        "id": reception.id,
        "dateTime": _timestamp(reception.date_time),
        "pvzId": reception.pvz_id,
        "status": reception.status.value,
    }


def product_to_dict(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "dateTime": _timestamp(product.date_time),
        "type": product.category.value,
        "receptionId": product.reception_id,
    }


def user_to_dict(user: User) -> dict[str, Any]:
    return {"id": user.id, "email": user.email, "role": user.role.value}


def reception_with_products_to_dict(item: ReceptionWithProducts) -> dict[str, Any]:
    return {
        "reception": reception_to_dict(item.reception),
        "products": [product_to_dict(p) for p in item.products],
    }


def full_info_to_list(infos: Iterable[FullPVZInfo]) -> list[dict[str, Any]]:
    """Render the nested PVZ → receptions → products view."""
    return [
        {
            "pvz": pvz_to_dict(info.pvz),
            "receptions": [reception_with_products_to_dict(r) for r in info.receptions],
        }
        for info in infos
    ]


def echo_json(payload: Any) -> None:
    """Write `payload` to stdout as indented JSON, keeping non-ASCII text."""
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
