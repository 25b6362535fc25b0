"""
Vessel SQLAlchemy model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from emissions_tracker.database import Base
from emissions_tracker.utils.constants import DEFAULT_DWT


class VesselDBModel(Base):
    """
    Vessel master data.

    Identified by IMO number. The vessel type code selects which reference
    curves apply to the vessel.
    """

    __tablename__ = "vessels"

    imo_no = Column(
        String(20),
        primary_key=True,
        comment="IMO number, globally unique",
    )

    name = Column(
        String(200),
        nullable=False,
        comment="Vessel display name",
    )

    vessel_type = Column(
        Integer,
        nullable=False,
        index=True,
        comment="Vessel type code used to select reference curves",
    )

    dwt = Column(
        Float,
        nullable=False,
        default=DEFAULT_DWT,
        comment="Deadweight tonnage",
    )

    emissions = relationship(
        "DailyLogEmissionDBModel",
        back_populates="vessel",
        order_by="DailyLogEmissionDBModel.to_utc",
        cascade="all, delete-orphan",
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<VesselDBModel: {self.imo_no} - {self.name}>"
