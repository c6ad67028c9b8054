"""Tests for the relational schema and its naming convention."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Column, Index, Integer, MetaData, String, Table, inspect

from pvz_service.adapters.db.metadata import metadata
from pvz_service.adapters.db.schema import OPEN_RECEPTION_INDEX

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=magic-value-comparison


def test_naming_convention_covers_multi_column_indexes():
    """Unnamed indexes are named after their table and every column."""
    scratch = MetaData(naming_convention=metadata.naming_convention)
    table = Table(
        "t",
        scratch,
        Column("id", Integer, primary_key=True),
        Column("a", String),
        Column("b", String),
        Index(None, "a", "b"),
    )
    (index,) = table.indexes
    assert index.name == "ix_t_a_b"


@pytest.mark.parametrize(
    "table, expected",
    [
        ("pvz", {"ix_pvz_registration_date"}),
        (
            "receptions",
            {"ix_receptions_pvz_id_date_time", OPEN_RECEPTION_INDEX},
        ),
        ("products", {"ix_products_reception_id_date_time"}),
    ],
)
def test_index_names(sqlite_engine_memory: Engine, table, expected):
    """Indexes carry the names the migration creates."""
    names = {ix["name"] for ix in inspect(sqlite_engine_memory).get_indexes(table)}
    assert expected <= names


@pytest.mark.parametrize(
    "table, expected",
    [
        ("pvz", {"ck_pvz_valid_city"}),
        (
            "receptions",
            {"ck_receptions_valid_status", "ck_receptions_closed_at_only_when_closed"},
        ),
        ("products", {"ck_products_valid_type"}),
        ("users", {"ck_users_valid_role"}),
    ],
)
def test_check_constraint_names(sqlite_engine_memory: Engine, table, expected):
    """Check constraints are prefixed by the convention."""
    checks = inspect(sqlite_engine_memory).get_check_constraints(table)
    assert expected <= {c["name"] for c in checks}


def test_open_reception_index_is_partial_and_unique(sqlite_engine_memory: Engine):
    """The single-open index is unique over pvz_id for open receptions only."""
    (index,) = [
        ix
        for ix in inspect(sqlite_engine_memory).get_indexes("receptions")
        if ix["name"] == OPEN_RECEPTION_INDEX
    ]
    assert index["unique"]
    assert index["column_names"] == ["pvz_id"]
