"""
Daily log emission SQLAlchemy model.

One record per voyage-leg log interval, keyed by (eid, log_id).
"""
from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from emissions_tracker.database import Base


def _quantity(comment: str) -> Column:
    return Column(Float, nullable=False, default=0.0, comment=comment)


class DailyLogEmissionDBModel(Base):
    """
    Emission quantities for one log interval [from_utc, to_utc).

    All quantities are non-negative; absent source values are stored as 0.
    """

    __tablename__ = "daily_log_emissions"

    eid = Column(String(50), primary_key=True)
    log_id = Column(String(50), primary_key=True)

    vessel_id = Column(
        String(20),
        ForeignKey("vessels.imo_no", ondelete="CASCADE"),
        nullable=False,
        comment="Owning vessel IMO number",
    )

    vessel = relationship("VesselDBModel", back_populates="emissions")

    from_utc = Column(DateTime(timezone=True), nullable=False)
    to_utc = Column(DateTime(timezone=True), nullable=False)

    # Tank-to-wake CO2 by subsystem
    met_co2 = _quantity("Main engine CO2 (t)")
    aet_co2 = _quantity("Auxiliary engine CO2 (t)")
    bot_co2 = _quantity("Boiler CO2 (t)")
    vrt_co2 = _quantity("Vapour recovery CO2 (t)")
    tot_co2 = _quantity("Total CO2 (t)")

    # Well-to-wake CO2 equivalent
    mew_co2e = _quantity("Main engine CO2e (t)")
    aew_co2e = _quantity("Auxiliary engine CO2e (t)")
    bow_co2e = _quantity("Boiler CO2e (t)")
    vrw_co2e = _quantity("Vapour recovery CO2e (t)")
    tot_w_co2e = _quantity("Total CO2e (t)")

    me_sox = _quantity("Main engine SOx")
    ae_sox = _quantity("Auxiliary engine SOx")
    bo_sox = _quantity("Boiler SOx")
    vr_sox = _quantity("Vapour recovery SOx")
    tot_sox = _quantity("Total SOx")

    me_nox = _quantity("Main engine NOx")
    ae_nox = _quantity("Auxiliary engine NOx")
    tot_nox = _quantity("Total NOx")

    me_pm10 = _quantity("Main engine PM10")
    ae_pm10 = _quantity("Auxiliary engine PM10")
    tot_pm10 = _quantity("Total PM10")

    aer_co2_t2w = _quantity("Annual efficiency ratio, CO2 tank-to-wake")
    aer_co2e_w2w = _quantity("Annual efficiency ratio, CO2e well-to-wake")
    eeoi_co2e_w2w = _quantity("Energy efficiency operational indicator, CO2e well-to-wake")

    __table_args__ = (
        Index("ix_daily_log_emissions_vessel_to_utc", "vessel_id", "to_utc"),
        {"comment": "Per-log-interval vessel emissions"},
    )

    def __repr__(self):
        return f"<DailyLogEmissionDBModel: {self.vessel_id} {self.eid}/{self.log_id} {self.to_utc}>"
