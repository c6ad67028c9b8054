"""Unit tests for database dialect handling."""

import pytest
from sqlalchemy.engine import make_url

from pvz_service.adapters.db.dialects import DialectName, UnsupportedDialect

# pylint: disable=too-few-public-methods


@pytest.mark.parametrize(
    "input_str,expected",
    [
        ("postgresql", DialectName.POSTGRES),
        ("postgres", DialectName.POSTGRES),
        ("pg", DialectName.POSTGRES),
        ("postgresql+psycopg", DialectName.POSTGRES),
        ("SQLite", DialectName.SQLITE),
        ("sqlite+pysqlite", DialectName.SQLITE),
    ],
)
def test_from_string_aliases(input_str, expected):
    """Aliases and driver suffixes map to the normalized dialect."""
    assert DialectName.from_string(input_str) is expected


@pytest.mark.parametrize("bad", [None, "", "  ", "mysql", "duckdb"])
def test_from_string_rejects_unsupported(bad):
    """Anything but PostgreSQL and SQLite is rejected."""
    with pytest.raises(UnsupportedDialect):
        DialectName.from_string(bad)


def test_from_url():
    """Parsed URLs resolve through their backend name."""
    url = make_url("postgresql+psycopg://u:p@localhost/pvz")
    assert DialectName.from_url(url) is DialectName.POSTGRES


def test_from_sqlalchemy_accepts_engine_like_objects():
    """Objects exposing `.dialect.name` are accepted."""

    class FakeDialect:
        """A fake dialect with a name attribute."""

        name = "sqlite"

    class FakeEngine:
        """A fake engine exposing a dialect attribute."""

        dialect = FakeDialect()

    assert DialectName.from_sqlalchemy(FakeEngine()) is DialectName.SQLITE  # type: ignore[arg-type]


def test_from_sqlalchemy_raises_when_missing_attribute():
    """Objects without `.dialect.name` are rejected."""

    class NotAnEngine:
        """A class that does not have a dialect attribute."""

    with pytest.raises(UnsupportedDialect):
        DialectName.from_sqlalchemy(NotAnEngine())  # type: ignore[arg-type]
