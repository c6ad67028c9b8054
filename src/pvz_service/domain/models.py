"""Entities and read models of the PVZ domain.

All entities are immutable snapshots; state transitions return a new instance.
Timestamps are timezone-aware UTC datetimes.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime

from .value_objects import City, ProductCategory, ReceptionStatus, UserRole


@dataclass(frozen=True, slots=True)
class PVZ:
    """A registered pickup point. Never updated or deleted once created."""

    id: str
    registration_date: datetime
    city: City


@dataclass(frozen=True, slots=True)
class Reception:
    """An intake batch opened at a PVZ."""

    id: str
    date_time: datetime
    pvz_id: str
    status: ReceptionStatus
    created_at: datetime
    closed_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        """Whether the reception still accepts products."""
        return self.status is ReceptionStatus.IN_PROGRESS

    def close(self, closed_at: datetime) -> Reception:
        """Return the closed form of this reception, stamped with `closed_at`."""
        return replace(self, status=ReceptionStatus.CLOSED, closed_at=closed_at)


@dataclass(frozen=True, slots=True)
class Product:
    """An item recorded against a reception."""

    id: str
    date_time: datetime
    category: ProductCategory
    reception_id: str


@dataclass(frozen=True, slots=True)
class User:
    """A registered user. Only the credential hash is ever stored."""

    id: str
    email: str
    password_hash: str = field(repr=False)
    role: UserRole
    created_at: datetime


# --- Read models ---


@dataclass(frozen=True, slots=True)
class ReceptionWithProducts:
    """A reception together with the products recorded against it."""

    reception: Reception
    products: tuple[Product, ...] = ()


@dataclass(frozen=True, slots=True)
class FullPVZInfo:
    """A PVZ together with its (date-filtered) receptions and their products."""

    pvz: PVZ
    receptions: tuple[ReceptionWithProducts, ...] = ()
