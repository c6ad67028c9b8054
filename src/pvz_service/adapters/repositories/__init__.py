"""Repository adapters: SQLAlchemy Core (production) and in-memory (tests)."""

from .memory import (
    InMemoryProductRepository,
    InMemoryPVZRepository,
    InMemoryReceptionRepository,
    InMemoryStoreData,
    InMemoryUserRepository,
)
from .sqlalchemy_repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyPVZRepository,
    SqlAlchemyReceptionRepository,
    SqlAlchemyUserRepository,
)

__all__ = [
    "InMemoryProductRepository",
    "InMemoryPVZRepository",
    "InMemoryReceptionRepository",
    "InMemoryStoreData",
    "InMemoryUserRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyPVZRepository",
    "SqlAlchemyReceptionRepository",
    "SqlAlchemyUserRepository",
]
