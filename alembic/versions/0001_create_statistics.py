"""create statistics table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "statistics",
        sa.Column("path", sa.String(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column(
            "display_mode", sa.String(), nullable=False, server_default="DEFAULT"
        ),
        sa.Column("group_name", sa.String(), nullable=True),
        sa.Column("statistics", sa.JSON(), nullable=False),
        sa.Column("last_modified", sa.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index("ix_statistics_group_name", "statistics", ["group_name"])


def downgrade():
    op.drop_index("ix_statistics_group_name", table_name="statistics")
    op.drop_table("statistics")
