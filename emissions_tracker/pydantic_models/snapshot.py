"""
Immutable snapshot models consumed by the baseline deviation engine.

Built from ORM rows (``from_attributes``) or directly in tests. By the time a
record reaches the engine every quantity is a number; absent source values
were normalized to 0.0 at the import boundary.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from emissions_tracker.utils.constants import DEFAULT_DWT


class SnapshotModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True, allow_inf_nan=False)


class ReferenceCoefficientRow(SnapshotModel):
    """One regression-curve parameter set."""

    row_id: int
    category: str
    vessel_type_id: int
    size: str | None = None
    traj: str | None = None
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0


class EmissionRecord(SnapshotModel):
    """Emission quantities for one log interval [from_utc, to_utc)."""

    eid: str
    log_id: str
    from_utc: datetime
    to_utc: datetime

    met_co2: float = Field(0.0, ge=0)
    aet_co2: float = Field(0.0, ge=0)
    bot_co2: float = Field(0.0, ge=0)
    vrt_co2: float = Field(0.0, ge=0)
    tot_co2: float = Field(0.0, ge=0)
    mew_co2e: float = Field(0.0, ge=0)
    aew_co2e: float = Field(0.0, ge=0)
    bow_co2e: float = Field(0.0, ge=0)
    vrw_co2e: float = Field(0.0, ge=0)
    tot_w_co2e: float = Field(0.0, ge=0)
    me_sox: float = Field(0.0, ge=0)
    ae_sox: float = Field(0.0, ge=0)
    bo_sox: float = Field(0.0, ge=0)
    vr_sox: float = Field(0.0, ge=0)
    tot_sox: float = Field(0.0, ge=0)
    me_nox: float = Field(0.0, ge=0)
    ae_nox: float = Field(0.0, ge=0)
    tot_nox: float = Field(0.0, ge=0)
    me_pm10: float = Field(0.0, ge=0)
    ae_pm10: float = Field(0.0, ge=0)
    tot_pm10: float = Field(0.0, ge=0)
    aer_co2_t2w: float = Field(0.0, ge=0)
    aer_co2e_w2w: float = Field(0.0, ge=0)
    eeoi_co2e_w2w: float = Field(0.0, ge=0)

    @model_validator(mode="after")
    def check_interval(self) -> "EmissionRecord":
        if self.to_utc <= self.from_utc:
            raise ValueError(
                f"to_utc ({self.to_utc}) must be after from_utc ({self.from_utc})"
            )
        return self


class VesselSnapshot(SnapshotModel):
    """A vessel together with its emission records, ordered by to_utc."""

    imo_no: str
    name: str
    vessel_type: int
    dwt: float | None = Field(DEFAULT_DWT, gt=0, description="Deadweight tonnage")
    emissions: tuple[EmissionRecord, ...] = ()
