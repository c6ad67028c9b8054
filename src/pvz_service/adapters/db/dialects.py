"""Supported database dialects.

The storage adapters only target PostgreSQL (production) and SQLite
(development and tests); anything else is rejected up front.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Connection, Engine


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Normalized names of the supported SQLAlchemy dialects."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Convert a dialect or backend string to a DialectName.

        Driver suffixes are ignored ('postgresql+psycopg' -> POSTGRES) and the
        usual Postgres aliases are accepted.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """
        base = (dialect_str or "").strip().lower().split("+", 1)[0]
        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE
        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")

    @classmethod
    def from_url(cls, url: URL) -> DialectName:
        """Return the dialect of a parsed SQLAlchemy URL."""
        return cls.from_string(url.get_backend_name())

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Return the dialect of a SQLAlchemy Engine or Connection.

        Raises:
            UnsupportedDialect: if the object has no dialect or it is not supported.
        """
        try:
            name = obj.dialect.name
        except AttributeError as e:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            ) from e
        return cls.from_string(name)
