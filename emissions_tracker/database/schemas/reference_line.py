"""
Reference line SQLAlchemy model.

One row per regression-curve parameter set from the Poseidon Principles /
Sea Cargo Charter reference dataset.
"""
from sqlalchemy import Column, Float, Index, Integer, String

from emissions_tracker.database import Base


class ReferenceLineDBModel(Base):
    """
    Reference curve coefficients.

    Static reference data, replaced wholesale on every import.
    """

    __tablename__ = "reference_lines"

    row_id = Column(Integer, primary_key=True, autoincrement=False)

    category = Column(
        String(20),
        nullable=False,
        comment="Curve family (e.g., 'PP' for Poseidon Principles)",
    )

    vessel_type_id = Column(
        Integer,
        nullable=False,
        comment="Vessel type code the curve applies to",
    )

    size = Column(
        String(50),
        nullable=True,
        comment="Size bracket",
    )

    traj = Column(
        String(50),
        nullable=True,
        comment="Trajectory identifier",
    )

    a = Column(Float, nullable=False, default=0.0)
    b = Column(Float, nullable=False, default=0.0)
    c = Column(Float, nullable=False, default=0.0)
    d = Column(Float, nullable=False, default=0.0)
    e = Column(Float, nullable=False, default=0.0)

    __table_args__ = (
        Index("ix_reference_lines_type_category", "vessel_type_id", "category"),
        {"comment": "Reference curve coefficients for baseline emissions"},
    )

    def __repr__(self):
        return (
            f"<ReferenceLineDBModel: {self.row_id} {self.category} "
            f"type={self.vessel_type_id} size={self.size} traj={self.traj}>"
        )
