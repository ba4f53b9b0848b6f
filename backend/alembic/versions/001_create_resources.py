"""Create resources table.

Revision ID: 001_create_resources
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_resources"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "resources",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_resources_name", "resources", ["name"])
    op.create_index("ix_resources_created_at", "resources", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_resources_created_at", table_name="resources")
    op.drop_index("ix_resources_name", table_name="resources")
    op.drop_table("resources")
