"""Relational schema of the PVZ service.

Four tables, all attached to the shared naming-convention metadata:

| Table        | Notes                                                        |
|--------------|--------------------------------------------------------------|
| ``pvz``      | immutable pickup points                                      |
| ``receptions`` | intake batches; FK -> ``pvz``                              |
| ``products`` | items of a reception; FK -> ``receptions`` (cascade delete)  |
| ``users``    | accounts; unique email                                       |

Constraints (enforced here):

| Constraint                                          | Purpose                          |
|-----------------------------------------------------|----------------------------------|
| UNIQUE(pvz_id) WHERE status = 'in_progress'         | at most one open reception per PVZ |
| CHECK(status IN ('in_progress', 'close'))           | closed set of reception states    |
| CHECK(closed_at IS NULL OR status = 'close')        | close time only on closed receptions |
| CHECK(city IN (...)), CHECK(type IN (...)), CHECK(role IN (...)) | enumerations        |
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    String,
    Table,
    text,
)

from pvz_service.domain.value_objects import (
    City,
    ProductCategory,
    ReceptionStatus,
    UserRole,
)

from .metadata import metadata
from .sa_types import UTCDateTime

__all__ = ["pvz", "receptions", "products", "users", "OPEN_RECEPTION_INDEX"]

ID_LENGTH = 36  # fits both ULIDs (26) and canonical UUID strings (36)

OPEN_RECEPTION_INDEX = "uq_receptions_one_open_per_pvz"


def _in_check(column: str, values: type) -> str:
    quoted = ", ".join(f"'{member.value}'" for member in values)
    return f"{column} IN ({quoted})"


_OPEN_PREDICATE = text(f"status = '{ReceptionStatus.IN_PROGRESS.value}'")

pvz = Table(
    "pvz",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True, comment="PVZ identifier."),
    Column(
        "registration_date",
        UTCDateTime(),
        nullable=False,
        comment="Server-assigned UTC registration timestamp.",
    ),
    Column("city", String(64), nullable=False, comment="City of the pickup point."),
    CheckConstraint(_in_check("city", City), name="valid_city"),
    Index(None, "registration_date"),
    comment="Registered pickup points.",
)

receptions = Table(
    "receptions",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True, comment="Reception identifier."),
    Column("date_time", UTCDateTime(), nullable=False, comment="Open timestamp."),
    Column(
        "pvz_id",
        String(ID_LENGTH),
        ForeignKey("pvz.id"),
        nullable=False,
        comment="Owning pickup point.",
    ),
    Column("status", String(16), nullable=False, comment="'in_progress' or 'close'."),
    Column("created_at", UTCDateTime(), nullable=False),
    Column(
        "closed_at",
        UTCDateTime(),
        nullable=True,
        comment="Set exactly once, on transition to closed.",
    ),
    CheckConstraint(_in_check("status", ReceptionStatus), name="valid_status"),
    CheckConstraint(
        f"closed_at IS NULL OR status = '{ReceptionStatus.CLOSED.value}'",
        name="closed_at_only_when_closed",
    ),
    Index(None, "pvz_id", "date_time"),
    Index(
        OPEN_RECEPTION_INDEX,
        "pvz_id",
        unique=True,
        sqlite_where=_OPEN_PREDICATE,
        postgresql_where=_OPEN_PREDICATE,
    ),
    comment="Intake batches opened at pickup points.",
)

products = Table(
    "products",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True, comment="Product identifier."),
    Column("date_time", UTCDateTime(), nullable=False, comment="Creation timestamp."),
    Column("type", String(64), nullable=False, comment="Product category."),
    Column(
        "reception_id",
        String(ID_LENGTH),
        ForeignKey("receptions.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning reception.",
    ),
    CheckConstraint(_in_check("type", ProductCategory), name="valid_type"),
    Index(None, "reception_id", "date_time"),
    comment="Items recorded against receptions.",
)

users = Table(
    "users",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True, comment="User identifier."),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(16), nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
    CheckConstraint(_in_check("role", UserRole), name="valid_role"),
    comment="User accounts.",
)
