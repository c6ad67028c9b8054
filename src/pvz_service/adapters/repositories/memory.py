"""In-memory repository implementations for testing purposes.

Note: These implementations are not thread-safe and are intended solely for
single-threaded tests. All repositories built over the same
`InMemoryStoreData` see each other's writes, mirroring tables in one database.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from pvz_service.domain.errors import ReceptionAlreadyOpen
from pvz_service.domain.models import PVZ, Product, Reception, User
from pvz_service.interfaces.repositories import (
    ProductRepository,
    PVZRepository,
    ReceptionRepository,
    UserRepository,
)


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared backing store for the in-memory repositories.

    Each mapping is keyed by entity id and preserves insertion order, which
    stands in for the creation order of rows in a table.
    """

    pvz: dict[str, PVZ] = field(default_factory=dict)
    receptions: dict[str, Reception] = field(default_factory=dict)
    products: dict[str, Product] = field(default_factory=dict)
    users: dict[str, User] = field(default_factory=dict)

    def snapshot(self) -> InMemoryStoreData:
        """Return an independent copy of the current contents.

        Entities are immutable, so copying the mappings is enough.
        """
        return InMemoryStoreData(
            pvz=dict(self.pvz),
            receptions=dict(self.receptions),
            products=dict(self.products),
            users=dict(self.users),
        )

    def restore(self, other: InMemoryStoreData) -> None:
        """Replace the current contents with those of `other`, in place."""
        self.pvz = dict(other.pvz)
        self.receptions = dict(other.receptions)
        self.products = dict(other.products)
        self.users = dict(other.users)


class InMemoryPVZRepository(PVZRepository):
    """In-memory PVZ repository."""

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def add(self, pvz: PVZ) -> None:
        self._data.pvz[pvz.id] = pvz

    def exists(self, pvz_id: str) -> bool:
        return pvz_id in self._data.pvz

    def list_all(self) -> list[PVZ]:
        return sorted(
            self._data.pvz.values(),
            key=lambda p: (p.registration_date, p.id),
            reverse=True,
        )


class InMemoryReceptionRepository(ReceptionRepository):
    """In-memory reception repository.

    Rejects a second open reception for a PVZ the same way the database's
    partial unique index does.
    """

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def add(self, reception: Reception) -> None:
        if reception.is_open and self.has_open(reception.pvz_id):
            raise ReceptionAlreadyOpen(reception.pvz_id)
        self._data.receptions[reception.id] = reception

    def has_open(self, pvz_id: str) -> bool:
        return self.get_open(pvz_id) is not None

    def get_open(self, pvz_id: str) -> Reception | None:
        open_receptions = [
            r for r in self._data.receptions.values() if r.pvz_id == pvz_id and r.is_open
        ]
        if not open_receptions:
            return None
        return max(open_receptions, key=lambda r: r.created_at)

    def close_by_id(self, reception_id: str, closed_at: datetime) -> int:
        reception = self._data.receptions.get(reception_id)
        if reception is None or not reception.is_open:
            return 0
        self._data.receptions[reception_id] = reception.close(closed_at)
        return 1

    def list_by_pvz_ids(self, pvz_ids: Sequence[str]) -> list[Reception]:
        wanted = set(pvz_ids)
        return [r for r in self._data.receptions.values() if r.pvz_id in wanted]


class InMemoryProductRepository(ProductRepository):
    """In-memory product repository."""

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def add(self, product: Product) -> None:
        self._data.products[product.id] = product

    def delete_last(self, reception_id: str) -> str | None:
        newest: Product | None = None
        for product in self._data.products.values():
            if product.reception_id != reception_id:
                continue
            # ">=" lets a later insertion win a timestamp tie
            if newest is None or product.date_time >= newest.date_time:
                newest = product
        if newest is None:
            return None
        del self._data.products[newest.id]
        return newest.id

    def list_by_reception_ids(self, reception_ids: Sequence[str]) -> list[Product]:
        wanted = set(reception_ids)
        return [p for p in self._data.products.values() if p.reception_id in wanted]


class InMemoryUserRepository(UserRepository):
    """In-memory user repository."""

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def add(self, user: User) -> None:
        self._data.users[user.id] = user

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_by_email(self, email: str) -> User | None:
        for user in self._data.users.values():
            if user.email == email:
                return user
        return None
