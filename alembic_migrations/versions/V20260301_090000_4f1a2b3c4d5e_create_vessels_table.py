"""create_vessels_table

Revision ID: 4f1a2b3c4d5e
Revises:
Create Date: 2026-03-01 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "4f1a2b3c4d5e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "vessels",
        sa.Column(
            "imo_no",
            sa.String(length=20),
            nullable=False,
            comment="IMO number, globally unique",
        ),
        sa.Column(
            "name",
            sa.String(length=200),
            nullable=False,
            comment="Vessel display name",
        ),
        sa.Column(
            "vessel_type",
            sa.Integer(),
            nullable=False,
            comment="Vessel type code used to select reference curves",
        ),
        sa.Column(
            "dwt",
            sa.Float(),
            nullable=False,
            comment="Deadweight tonnage",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("imo_no"),
    )
    op.create_index(
        op.f("ix_vessels_vessel_type"), "vessels", ["vessel_type"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_vessels_vessel_type"), table_name="vessels")
    op.drop_table("vessels")
