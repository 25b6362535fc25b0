"""create_daily_log_emissions_table

Revision ID: b3c4d5e6f7a8
Revises: 7a8b9c0d1e2f
Create Date: 2026-03-01 09:02:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "b3c4d5e6f7a8"
down_revision = "7a8b9c0d1e2f"
branch_labels = None
depends_on = None

QUANTITY_COLUMNS = (
    "met_co2",
    "aet_co2",
    "bot_co2",
    "vrt_co2",
    "tot_co2",
    "mew_co2e",
    "aew_co2e",
    "bow_co2e",
    "vrw_co2e",
    "tot_w_co2e",
    "me_sox",
    "ae_sox",
    "bo_sox",
    "vr_sox",
    "tot_sox",
    "me_nox",
    "ae_nox",
    "tot_nox",
    "me_pm10",
    "ae_pm10",
    "tot_pm10",
    "aer_co2_t2w",
    "aer_co2e_w2w",
    "eeoi_co2e_w2w",
)


def upgrade() -> None:
    op.create_table(
        "daily_log_emissions",
        sa.Column("eid", sa.String(length=50), nullable=False),
        sa.Column("log_id", sa.String(length=50), nullable=False),
        sa.Column(
            "vessel_id",
            sa.String(length=20),
            nullable=False,
            comment="Owning vessel IMO number",
        ),
        sa.Column("from_utc", sa.DateTime(timezone=True), nullable=False),
        sa.Column("to_utc", sa.DateTime(timezone=True), nullable=False),
        *[sa.Column(name, sa.Float(), nullable=False) for name in QUANTITY_COLUMNS],
        sa.ForeignKeyConstraint(["vessel_id"], ["vessels.imo_no"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("eid", "log_id"),
        comment="Per-log-interval vessel emissions",
    )
    op.create_index(
        "ix_daily_log_emissions_vessel_to_utc",
        "daily_log_emissions",
        ["vessel_id", "to_utc"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        "ix_daily_log_emissions_vessel_to_utc", table_name="daily_log_emissions"
    )
    op.drop_table("daily_log_emissions")
