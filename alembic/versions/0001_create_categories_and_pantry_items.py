"""create categories and pantry items

Revision ID: 0001_pantry
Revises:
Create Date: 2026-01-17

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_pantry"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("normalized_name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_categories_normalized_name", "categories", ["normalized_name"], unique=True
    )

    op.create_table(
        "pantry_items",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column(
            "category_id", sa.String(26), sa.ForeignKey("categories.id"), nullable=False
        ),
        sa.Column("expiration_date", sa.Date(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_pantry_items_category_id", "pantry_items", ["category_id"])
    op.create_index("ix_pantry_items_expiration_date", "pantry_items", ["expiration_date"])


def downgrade() -> None:
    op.drop_index("ix_pantry_items_expiration_date", table_name="pantry_items")
    op.drop_index("ix_pantry_items_category_id", table_name="pantry_items")
    op.drop_table("pantry_items")
    op.drop_index("ix_categories_normalized_name", table_name="categories")
    op.drop_table("categories")
