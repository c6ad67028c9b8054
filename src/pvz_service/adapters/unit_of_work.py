"""SQLAlchemy-backed Unit of Work for the PVZ service.

Each `with uow:` block checks a Connection out of the engine, binds the four
SQLAlchemy repositories to it, and releases it on exit. The connection runs
in SQLAlchemy 2.x autobegin mode, so everything between enter and `commit()`
is one database transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from pvz_service.adapters.repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyPVZRepository,
    SqlAlchemyReceptionRepository,
    SqlAlchemyUserRepository,
)
from pvz_service.interfaces.errors import StorageFailure
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Args:
        engine: Engine to check connections out of.
        execution_options: Connection options applied to every unit, e.g.
            ``{"isolation_level": "REPEATABLE READ"}`` on PostgreSQL or
            ``{"sqlite_begin": "DEFERRED"}`` on SQLite for snapshot reads.

    Driver errors escaping the unit, including from `commit()` and `rollback()`,
    are re-raised as `StorageFailure`. Domain errors pass through untouched.
    """

    def __init__(
        self, engine: Engine, execution_options: Mapping[str, Any] | None = None
    ):
        self.engine = engine
        self.execution_options = dict(execution_options or {})
        self.connection: Connection

    def __enter__(self):
        try:
            self.connection = self.engine.connect()
            if self.execution_options:
                self.connection.execution_options(**self.execution_options)
        except SQLAlchemyError as e:
            raise StorageFailure(f"cannot open unit of work: {e}") from e
        self.pvz = SqlAlchemyPVZRepository(self.connection)
        self.receptions = SqlAlchemyReceptionRepository(self.connection)
        self.products = SqlAlchemyProductRepository(self.connection)
        self.users = SqlAlchemyUserRepository(self.connection)
        return super().__enter__()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self.connection.close()
        if isinstance(exc, SQLAlchemyError):
            logger.error("Storage failure, unit of work rolled back: %s", exc)
            raise StorageFailure(str(exc)) from exc

    def commit(self):
        try:
            self.connection.commit()
        except SQLAlchemyError as e:
            raise StorageFailure(f"commit failed: {e}") from e

    def rollback(self):
        try:
            self.connection.rollback()
        except SQLAlchemyError as e:
            raise StorageFailure(f"rollback failed: {e}") from e
