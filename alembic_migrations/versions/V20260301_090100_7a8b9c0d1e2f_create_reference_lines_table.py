"""create_reference_lines_table

Revision ID: 7a8b9c0d1e2f
Revises: 4f1a2b3c4d5e
Create Date: 2026-03-01 09:01:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "7a8b9c0d1e2f"
down_revision = "4f1a2b3c4d5e"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "reference_lines",
        sa.Column("row_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column(
            "category",
            sa.String(length=20),
            nullable=False,
            comment="Curve family (e.g., 'PP' for Poseidon Principles)",
        ),
        sa.Column(
            "vessel_type_id",
            sa.Integer(),
            nullable=False,
            comment="Vessel type code the curve applies to",
        ),
        sa.Column("size", sa.String(length=50), nullable=True, comment="Size bracket"),
        sa.Column(
            "traj", sa.String(length=50), nullable=True, comment="Trajectory identifier"
        ),
        sa.Column("a", sa.Float(), nullable=False),
        sa.Column("b", sa.Float(), nullable=False),
        sa.Column("c", sa.Float(), nullable=False),
        sa.Column("d", sa.Float(), nullable=False),
        sa.Column("e", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("row_id"),
        comment="Reference curve coefficients for baseline emissions",
    )
    op.create_index(
        "ix_reference_lines_type_category",
        "reference_lines",
        ["vessel_type_id", "category"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_reference_lines_type_category", table_name="reference_lines")
    op.drop_table("reference_lines")
