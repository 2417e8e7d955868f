"""Create projects table

Revision ID: create_projects
Revises:
Create Date: 2026-10-18 10:00:00.000000

Таблица projects: id (bigserial), name (nullable), date_created (по умолчанию текущая дата).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "create_projects"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False, comment="ID проекта"),
        sa.Column("name", sa.String(255), nullable=True, comment="Название проекта"),
        sa.Column(
            "date_created",
            sa.Date(),
            nullable=False,
            server_default=sa.text("CURRENT_DATE"),
            comment="Дата создания",
        ),
        sa.PrimaryKeyConstraint("id", name="projects_pkey"),
        comment="Проекты",
    )


def downgrade() -> None:
    op.drop_table("projects")
