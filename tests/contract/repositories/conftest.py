"""Fixtures for repository contract tests.

`repos` bundles the four repositories of one backend over a shared store,
the way a unit of work exposes them.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import pytest

from pvz_service.adapters.repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyPVZRepository,
    SqlAlchemyReceptionRepository,
    SqlAlchemyUserRepository,
)
from pvz_service.adapters.repositories.memory import (
    InMemoryProductRepository,
    InMemoryPVZRepository,
    InMemoryReceptionRepository,
    InMemoryStoreData,
    InMemoryUserRepository,
)
from pvz_service.interfaces.repositories import (
    ProductRepository,
    PVZRepository,
    ReceptionRepository,
    UserRepository,
)


@dataclass
class Repos:
    """The four repository ports of one backend."""

    pvz: PVZRepository
    receptions: ReceptionRepository
    products: ProductRepository
    users: UserRepository


@pytest.fixture(params=["memory", "sqlite", "postgres"])
def repos(request: pytest.FixtureRequest) -> Iterable[Repos]:
    """Yield fresh repositories for the requested backend.

    SQL-backed repositories share one connection whose transaction is rolled
    back afterwards.
    """
    match request.param:
        case "memory":
            data = InMemoryStoreData()
            yield Repos(
                pvz=InMemoryPVZRepository(data),
                receptions=InMemoryReceptionRepository(data),
                products=InMemoryProductRepository(data),
                users=InMemoryUserRepository(data),
            )
        case "sqlite" | "postgres":
            fixture = (
                "sqlite_engine_file" if request.param == "sqlite" else "postgres_engine"
            )
            engine = request.getfixturevalue(fixture)
            with engine.connect() as conn:
                yield Repos(
                    pvz=SqlAlchemyPVZRepository(conn),
                    receptions=SqlAlchemyReceptionRepository(conn),
                    products=SqlAlchemyProductRepository(conn),
                    users=SqlAlchemyUserRepository(conn),
                )
                conn.rollback()
        case _:
            raise ValueError(f"unknown repository backend: {request.param}")
