"""Initial schema — customers and addresses.

Revision ID: 001_customers
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_customers"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("date_of_birth", sa.Date, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_customers_first_name", "customers", ["first_name"])

    op.create_table(
        "addresses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "customer_id", sa.Integer,
            sa.ForeignKey("customers.id", ondelete="CASCADE"),
            nullable=False, unique=True,
        ),
        sa.Column("street", sa.String(255), nullable=True),
        sa.Column("town", sa.String(255), nullable=True),
        sa.Column("county", sa.String(255), nullable=True),
        sa.Column("postcode", sa.String(10), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("addresses")
    op.drop_index("ix_customers_first_name", table_name="customers")
    op.drop_table("customers")
