"""Unit of Work interface for the PVZ service.

Defines the AbstractUnitOfWork contract: a context-managed atomic unit exposing
the repository ports, with abstract commit/rollback methods.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from typing import TypeVar

from .repositories import (
    ProductRepository,
    PVZRepository,
    ReceptionRepository,
    UserRepository,
)

T = TypeVar("T")


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work.

    Entering the context acquires the transactional resource. Leaving it always
    rolls back anything not yet committed, whatever the exit path, so a unit is
    committed only by an explicit call to `commit()`.
    """

    pvz: PVZRepository
    receptions: ReceptionRepository
    products: ProductRepository
    users: UserRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    def run_atomic(self, work: Callable[[AbstractUnitOfWork], T]) -> T:
        """Run `work` inside one atomic unit and commit if it returns.

        Any exception raised by `work` rolls the unit back and propagates
        unchanged.

        Args:
            work: Callable receiving this unit of work.

        Returns:
            Whatever `work` returned.
        """
        with self:
            result = work(self)
            self.commit()
        return result

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
