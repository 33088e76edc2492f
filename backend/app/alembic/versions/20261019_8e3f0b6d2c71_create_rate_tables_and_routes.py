"""create rate tables and routes tables

Revision ID: 8e3f0b6d2c71
Revises: 5a1c7e2b9d40
Create Date: 2026-10-19 09:10:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "8e3f0b6d2c71"
down_revision = "5a1c7e2b9d40"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "rate_tables",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("client_id", sa.String(length=36), nullable=False),
        sa.Column("pricing_model", sa.String(length=30), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_rate_tables_client_id"), "rate_tables", ["client_id"])
    op.create_index(op.f("ix_rate_tables_pricing_model"), "rate_tables", ["pricing_model"])

    op.create_table(
        "routes",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("rate_table_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("origin", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("destination", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("rates", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["rate_table_id"], ["rate_tables.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_routes_rate_table_id"), "routes", ["rate_table_id"])


def downgrade() -> None:
    op.drop_index(op.f("ix_routes_rate_table_id"), table_name="routes")
    op.drop_table("routes")
    op.drop_index(op.f("ix_rate_tables_pricing_model"), table_name="rate_tables")
    op.drop_index(op.f("ix_rate_tables_client_id"), table_name="rate_tables")
    op.drop_table("rate_tables")
