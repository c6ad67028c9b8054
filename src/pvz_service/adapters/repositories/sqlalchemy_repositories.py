"""Repository ports implemented with SQLAlchemy Core.

Every repository wraps the `Connection` owned by the unit of work and never
commits; the unit of work decides the outcome of the transaction.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.exc import IntegrityError

from pvz_service.adapters.db.schema import (
    OPEN_RECEPTION_INDEX,
    products,
    pvz,
    receptions,
    users,
)
from pvz_service.domain.errors import ReceptionAlreadyOpen
from pvz_service.domain.models import PVZ, Product, Reception, User
from pvz_service.domain.value_objects import (
    City,
    ProductCategory,
    ReceptionStatus,
    UserRole,
)
from pvz_service.interfaces.repositories import (
    ProductRepository,
    PVZRepository,
    ReceptionRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row

_RECEPTION_COLUMNS = (
    receptions.c.id,
    receptions.c.date_time,
    receptions.c.pvz_id,
    receptions.c.status,
    receptions.c.created_at,
    receptions.c.closed_at,
)

_PRODUCT_COLUMNS = (
    products.c.id,
    products.c.date_time,
    products.c.type,
    products.c.reception_id,
)


# --- row mappers ---


def _to_pvz(row: Row) -> PVZ:
    return PVZ(id=row.id, registration_date=row.registration_date, city=City(row.city))


def _to_reception(row: Row) -> Reception:
    return Reception(
        id=row.id,
        date_time=row.date_time,
        pvz_id=row.pvz_id,
        status=ReceptionStatus(row.status),
        created_at=row.created_at,
        closed_at=row.closed_at,
    )


def _to_product(row: Row) -> Product:
    return Product(
        id=row.id,
        date_time=row.date_time,
        category=ProductCategory(row.type),
        reception_id=row.reception_id,
    )


def _to_user(row: Row) -> User:
    return User(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        role=UserRole(row.role),
        created_at=row.created_at,
    )


# --- repositories ---


class SqlAlchemyPVZRepository(PVZRepository):
    """PVZ repository backed by the ``pvz`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, pvz_record: PVZ) -> None:
        self.connection.execute(
            insert(pvz).values(
                id=pvz_record.id,
                registration_date=pvz_record.registration_date,
                city=pvz_record.city.value,
            )
        )

    def exists(self, pvz_id: str) -> bool:
        stmt = select(exists().where(pvz.c.id == pvz_id))
        return bool(self.connection.execute(stmt).scalar())

    def list_all(self) -> list[PVZ]:
        stmt = select(pvz.c.id, pvz.c.registration_date, pvz.c.city).order_by(
            pvz.c.registration_date.desc(), pvz.c.id.desc()
        )
        return [_to_pvz(row) for row in self.connection.execute(stmt)]


class SqlAlchemyReceptionRepository(ReceptionRepository):
    """Reception repository backed by the ``receptions`` table.

    The partial unique index on open receptions backs up the service-level
    "no open reception" check: a concurrent creator that loses the race gets
    `ReceptionAlreadyOpen` rather than a second open reception.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, reception: Reception) -> None:
        stmt = insert(receptions).values(
            id=reception.id,
            date_time=reception.date_time,
            pvz_id=reception.pvz_id,
            status=reception.status.value,
            created_at=reception.created_at,
            closed_at=reception.closed_at,
        )
        try:
            self.connection.execute(stmt)
        except IntegrityError as e:
            if _violates_open_reception_index(e):
                raise ReceptionAlreadyOpen(reception.pvz_id) from e
            raise

    def has_open(self, pvz_id: str) -> bool:
        stmt = select(exists().where(*_open_for(pvz_id)))
        return bool(self.connection.execute(stmt).scalar())

    def get_open(self, pvz_id: str) -> Reception | None:
        stmt = (
            select(*_RECEPTION_COLUMNS)
            .where(*_open_for(pvz_id))
            .order_by(receptions.c.created_at.desc())
            .limit(1)
        )
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return _to_reception(row)

    def close_by_id(self, reception_id: str, closed_at: datetime) -> int:
        result = self.connection.execute(
            update(receptions)
            .where(
                receptions.c.id == reception_id,
                receptions.c.status == ReceptionStatus.IN_PROGRESS.value,
            )
            .values(status=ReceptionStatus.CLOSED.value, closed_at=closed_at)
        )
        return result.rowcount

    def list_by_pvz_ids(self, pvz_ids: Sequence[str]) -> list[Reception]:
        if not pvz_ids:
            return []
        stmt = (
            select(*_RECEPTION_COLUMNS)
            .where(receptions.c.pvz_id.in_(list(pvz_ids)))
            .order_by(receptions.c.date_time, receptions.c.id)
        )
        return [_to_reception(row) for row in self.connection.execute(stmt)]


class SqlAlchemyProductRepository(ProductRepository):
    """Product repository backed by the ``products`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, product: Product) -> None:
        self.connection.execute(
            insert(products).values(
                id=product.id,
                date_time=product.date_time,
                type=product.category.value,
                reception_id=product.reception_id,
            )
        )

    def delete_last(self, reception_id: str) -> str | None:
        """Delete the newest product in one statement and return its id.

        Returns None when nothing was deleted, including when a concurrent
        delete removed the same row first.
        """
        # aliased so the subquery does not correlate to the DELETE target
        candidates = products.alias("candidates")
        # ids are generated in creation order, so they break timestamp ties
        newest = (
            select(candidates.c.id)
            .where(candidates.c.reception_id == reception_id)
            .order_by(candidates.c.date_time.desc(), candidates.c.id.desc())
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            delete(products)
            .where(products.c.id == newest)
            .returning(products.c.id)
        )
        return self.connection.execute(stmt).scalar()

    def list_by_reception_ids(self, reception_ids: Sequence[str]) -> list[Product]:
        if not reception_ids:
            return []
        stmt = (
            select(*_PRODUCT_COLUMNS)
            .where(products.c.reception_id.in_(list(reception_ids)))
            .order_by(products.c.date_time, products.c.id)
        )
        return [_to_product(row) for row in self.connection.execute(stmt)]


class SqlAlchemyUserRepository(UserRepository):
    """User repository backed by the ``users`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, user: User) -> None:
        self.connection.execute(
            insert(users).values(
                id=user.id,
                email=user.email,
                password_hash=user.password_hash,
                role=user.role.value,
                created_at=user.created_at,
            )
        )

    def email_exists(self, email: str) -> bool:
        stmt = select(exists().where(users.c.email == email))
        return bool(self.connection.execute(stmt).scalar())

    def get_by_email(self, email: str) -> User | None:
        stmt = select(
            users.c.id,
            users.c.email,
            users.c.password_hash,
            users.c.role,
            users.c.created_at,
        ).where(users.c.email == email)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return _to_user(row)


# --- helpers ---


def _open_for(pvz_id: str) -> tuple:
    return (
        receptions.c.pvz_id == pvz_id,
        receptions.c.status == ReceptionStatus.IN_PROGRESS.value,
    )


def _violates_open_reception_index(error: IntegrityError) -> bool:
    # Postgres names the index; SQLite names the indexed column
    message = str(error.orig)
    return OPEN_RECEPTION_INDEX in message or "receptions.pvz_id" in message
