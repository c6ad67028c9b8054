"""Repository ports for the PVZ, Reception, Product and User records.

Each port is a narrow capability set. Implementations operate inside the
transaction owned by the unit of work that created them and must never commit
on their own.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from datetime import datetime

from pvz_service.domain.models import PVZ, Product, Reception, User


class PVZRepository(abc.ABC):
    """Persistence of pickup points."""

    @abc.abstractmethod
    def add(self, pvz: PVZ) -> None:
        """Persist a new PVZ."""

    @abc.abstractmethod
    def exists(self, pvz_id: str) -> bool:
        """Return True if a PVZ with `pvz_id` exists."""

    @abc.abstractmethod
    def list_all(self) -> list[PVZ]:
        """Return every PVZ ordered by registration date, newest first."""


class ReceptionRepository(abc.ABC):
    """Persistence of receptions."""

    @abc.abstractmethod
    def add(self, reception: Reception) -> None:
        """Persist a new reception.

        Raises:
            ReceptionAlreadyOpen: If the storage backend rejects a second open
                reception for the same PVZ.
        """

    @abc.abstractmethod
    def has_open(self, pvz_id: str) -> bool:
        """Return True if the PVZ has a reception in progress."""

    @abc.abstractmethod
    def get_open(self, pvz_id: str) -> Reception | None:
        """Return the reception in progress for the PVZ, or None."""

    @abc.abstractmethod
    def close_by_id(self, reception_id: str, closed_at: datetime) -> int:
        """Close the reception if it is still in progress.

        Args:
            reception_id: The reception to close.
            closed_at: Close timestamp to stamp on the reception.

        Returns:
            Number of records affected. 0 means the reception was not in
            progress any more (already closed, possibly concurrently).
        """

    @abc.abstractmethod
    def list_by_pvz_ids(self, pvz_ids: Sequence[str]) -> list[Reception]:
        """Return all receptions owned by any of the given PVZ ids."""


class ProductRepository(abc.ABC):
    """Persistence of products."""

    @abc.abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product."""

    @abc.abstractmethod
    def delete_last(self, reception_id: str) -> str | None:
        """Delete the most recently created product of the reception.

        Returns:
            The id of the removed product, or None if no row was deleted
            (the reception had none, or a concurrent delete took it first).
        """

    @abc.abstractmethod
    def list_by_reception_ids(self, reception_ids: Sequence[str]) -> list[Product]:
        """Return all products owned by any of the given reception ids."""


class UserRepository(abc.ABC):
    """Persistence of users."""

    @abc.abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user."""

    @abc.abstractmethod
    def email_exists(self, email: str) -> bool:
        """Return True if a user with `email` is registered."""

    @abc.abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user registered with `email`, or None."""
