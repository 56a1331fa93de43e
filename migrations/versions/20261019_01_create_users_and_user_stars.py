"""create users and user_stars tables

Revision ID: 5c1e0d7a9b42
Revises: 
Create Date: 2026-10-19 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c1e0d7a9b42"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("external_id", sa.String(), primary_key=True),
        sa.Column("handle", sa.String(length=8), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("handle", name="uq_users_handle"),
    )

    op.create_table(
        "user_stars",
        sa.Column("handle", sa.String(length=8), primary_key=True),
        sa.Column("stars", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("user_stars")
    op.drop_table("users")
