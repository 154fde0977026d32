"""Initial schema — usuarios table.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("edad", sa.Integer, nullable=True),
        sa.Column("telefono", sa.Text, nullable=True),
        sa.CheckConstraint(
            "edad IS NULL OR (edad >= 0 AND edad <= 120)",
            name="ck_usuarios_edad_rango",
        ),
    )
    op.create_index("ix_usuarios_email", "usuarios", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_usuarios_email", table_name="usuarios")
    op.drop_table("usuarios")
