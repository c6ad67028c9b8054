"""create pvz, receptions, products and users tables

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2026-10-18 09:12:41.503118

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from pvz_service.adapters.db.sa_types import UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9a1c2b7d40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

OPEN_PREDICATE = "status = 'in_progress'"


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "pvz",
        sa.Column("id", sa.String(length=36), nullable=False, comment="PVZ identifier."),
        sa.Column(
            "registration_date",
            UTCDateTime(),
            nullable=False,
            comment="Server-assigned UTC registration timestamp.",
        ),
        sa.Column(
            "city", sa.String(length=64), nullable=False, comment="City of the pickup point."
        ),
        sa.CheckConstraint(
            "city IN ('Москва', 'Санкт-Петербург', 'Казань')",
            name=op.f("ck_pvz_valid_city"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_pvz")),
        comment="Registered pickup points.",
    )
    op.create_index(
        op.f("ix_pvz_registration_date"), "pvz", ["registration_date"], unique=False
    )

    op.create_table(
        "receptions",
        sa.Column(
            "id", sa.String(length=36), nullable=False, comment="Reception identifier."
        ),
        sa.Column("date_time", UTCDateTime(), nullable=False, comment="Open timestamp."),
        sa.Column(
            "pvz_id", sa.String(length=36), nullable=False, comment="Owning pickup point."
        ),
        sa.Column(
            "status",
            sa.String(length=16),
            nullable=False,
            comment="'in_progress' or 'close'.",
        ),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column(
            "closed_at",
            UTCDateTime(),
            nullable=True,
            comment="Set exactly once, on transition to closed.",
        ),
        sa.CheckConstraint(
            "status IN ('in_progress', 'close')", name=op.f("ck_receptions_valid_status")
        ),
        sa.CheckConstraint(
            "closed_at IS NULL OR status = 'close'",
            name=op.f("ck_receptions_closed_at_only_when_closed"),
        ),
        sa.ForeignKeyConstraint(
            ["pvz_id"], ["pvz.id"], name=op.f("fk_receptions_pvz_id_pvz")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_receptions")),
        comment="Intake batches opened at pickup points.",
    )
    op.create_index(
        op.f("ix_receptions_pvz_id_date_time"),
        "receptions",
        ["pvz_id", "date_time"],
        unique=False,
    )
    op.create_index(
        "uq_receptions_one_open_per_pvz",
        "receptions",
        ["pvz_id"],
        unique=True,
        sqlite_where=sa.text(OPEN_PREDICATE),
        postgresql_where=sa.text(OPEN_PREDICATE),
    )

    op.create_table(
        "products",
        sa.Column(
            "id", sa.String(length=36), nullable=False, comment="Product identifier."
        ),
        sa.Column(
            "date_time", UTCDateTime(), nullable=False, comment="Creation timestamp."
        ),
        sa.Column("type", sa.String(length=64), nullable=False, comment="Product category."),
        sa.Column(
            "reception_id",
            sa.String(length=36),
            nullable=False,
            comment="Owning reception.",
        ),
        sa.CheckConstraint(
            "type IN ('электроника', 'одежда', 'обувь')",
            name=op.f("ck_products_valid_type"),
        ),
        sa.ForeignKeyConstraint(
            ["reception_id"],
            ["receptions.id"],
            name=op.f("fk_products_reception_id_receptions"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_products")),
        comment="Items recorded against receptions.",
    )
    op.create_index(
        op.f("ix_products_reception_id_date_time"),
        "products",
        ["reception_id", "date_time"],
        unique=False,
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False, comment="User identifier."),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.CheckConstraint(
            "role IN ('client', 'employee', 'moderator')",
            name=op.f("ck_users_valid_role"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
        comment="User accounts.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("users")
    op.drop_index(op.f("ix_products_reception_id_date_time"), table_name="products")
    op.drop_table("products")
    op.drop_index("uq_receptions_one_open_per_pvz", table_name="receptions")
    op.drop_index(op.f("ix_receptions_pvz_id_date_time"), table_name="receptions")
    op.drop_table("receptions")
    op.drop_index(op.f("ix_pvz_registration_date"), table_name="pvz")
    op.drop_table("pvz")
