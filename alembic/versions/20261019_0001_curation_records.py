"""curation records table

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "curation_records",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("object_id", sa.String(length=256), nullable=True),
        sa.Column("actor_id", sa.String(length=256), nullable=True),
        sa.Column("task_name", sa.String(length=128), nullable=False),
        sa.Column("record_type", sa.String(length=128), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("status", sa.Integer(), nullable=False),
        sa.Column("result", sa.Text(), nullable=True),
    )
    op.create_index("ix_curation_records_object_id", "curation_records", ["object_id"])
    op.create_index("ix_curation_records_task_name", "curation_records", ["task_name"])


def downgrade() -> None:
    op.drop_index("ix_curation_records_task_name", table_name="curation_records")
    op.drop_index("ix_curation_records_object_id", table_name="curation_records")
    op.drop_table("curation_records")
