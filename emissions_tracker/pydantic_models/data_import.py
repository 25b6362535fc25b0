"""
Pydantic models validating externally supplied snapshot files.

Field aliases are the keys used by the source JSON/CSV exports. Every numeric
emission quantity has a default of 0 so the engine never sees absent values.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from emissions_tracker.utils.constants import EMISSION_QUANTITY_FIELDS
from emissions_tracker.utils.datetime_utils import as_utc


class SourceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)


def _none_to_zero(value: Any) -> Any:
    if value is None or value == "":
        return 0
    return value


class VesselImport(SourceModel):
    """Row of vessels.json."""

    imo_no: str = Field(..., alias="IMONo")
    name: str = Field(..., alias="Name")
    vessel_type: int = Field(..., alias="VesselType")
    dwt: float | None = Field(None, gt=0, alias="DWT")

    @field_validator("imo_no", mode="before")
    @classmethod
    def coerce_imo(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            raise ValueError("IMONo is empty")
        return str(value).strip()

    @field_validator("dwt", mode="before")
    @classmethod
    def empty_dwt(cls, value: Any) -> Any:
        if value in (None, "", 0, "0"):
            return None
        return value


class ReferenceLineImport(SourceModel):
    """Row of pp-reference.json."""

    row_id: int = Field(..., alias="RowID")
    category: str = Field(..., alias="Category")
    vessel_type_id: int = Field(..., alias="VesselTypeID")
    size: str | None = Field(None, alias="Size")
    traj: str | None = Field(None, alias="Traj")
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0

    @field_validator("size", "traj", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("a", "b", "c", "d", "e", mode="before")
    @classmethod
    def zero_if_absent(cls, value: Any) -> Any:
        return _none_to_zero(value)


class EmissionImport(SourceModel):
    """Row of daily-log-emissions.json."""

    eid: str = Field(..., alias="EID")
    vessel_id: str = Field(..., alias="VesselID")
    log_id: str = Field(..., alias="LOGID")
    from_utc: datetime = Field(..., alias="FromUTC")
    to_utc: datetime = Field(..., alias="TOUTC")

    met_co2: float = Field(0.0, ge=0, alias="MET2WCO2")
    aet_co2: float = Field(0.0, ge=0, alias="AET2WCO2")
    bot_co2: float = Field(0.0, ge=0, alias="BOT2WCO2")
    vrt_co2: float = Field(0.0, ge=0, alias="VRT2WCO2")
    tot_co2: float = Field(0.0, ge=0, alias="TotT2WCO2")
    mew_co2e: float = Field(0.0, ge=0, alias="MEW2WCO2e")
    aew_co2e: float = Field(0.0, ge=0, alias="AEW2WCO2e")
    bow_co2e: float = Field(0.0, ge=0, alias="BOW2WCO2e")
    vrw_co2e: float = Field(0.0, ge=0, alias="VRW2WCO2e")
    tot_w_co2e: float = Field(0.0, ge=0, alias="ToTW2WCO2")
    me_sox: float = Field(0.0, ge=0, alias="MESox")
    ae_sox: float = Field(0.0, ge=0, alias="AESox")
    bo_sox: float = Field(0.0, ge=0, alias="BOSox")
    vr_sox: float = Field(0.0, ge=0, alias="VRSox")
    tot_sox: float = Field(0.0, ge=0, alias="TotSOx")
    me_nox: float = Field(0.0, ge=0, alias="MENOx")
    ae_nox: float = Field(0.0, ge=0, alias="AENOx")
    tot_nox: float = Field(0.0, ge=0, alias="TotNOx")
    me_pm10: float = Field(0.0, ge=0, alias="MEPM10")
    ae_pm10: float = Field(0.0, ge=0, alias="AEPM10")
    tot_pm10: float = Field(0.0, ge=0, alias="TotPM10")
    aer_co2_t2w: float = Field(0.0, ge=0, alias="AERCO2T2W")
    aer_co2e_w2w: float = Field(0.0, ge=0, alias="AERCO2eW2W")
    eeoi_co2e_w2w: float = Field(0.0, ge=0, alias="EEOICO2eW2W")

    @field_validator("eid", "vessel_id", "log_id", mode="before")
    @classmethod
    def coerce_key(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            raise ValueError("key field is empty")
        return str(value).strip()

    @field_validator("from_utc", "to_utc")
    @classmethod
    def normalize_utc(cls, value: datetime) -> datetime:
        # Persisted timestamps are UTC instants
        return as_utc(value)

    @field_validator(*EMISSION_QUANTITY_FIELDS, mode="before")
    @classmethod
    def zero_if_absent(cls, value: Any) -> Any:
        return _none_to_zero(value)

    @model_validator(mode="after")
    def check_interval(self) -> "EmissionImport":
        if self.to_utc <= self.from_utc:
            raise ValueError("TOUTC must be after FromUTC")
        return self


class ImportStats(BaseModel):
    """Counts produced by one import run."""

    vessels: int = 0
    reference_lines: int = 0
    emissions: int = 0
    skipped: int = 0
    errors: list[str] = Field(default_factory=list)


class ImportResponse(BaseModel):
    message: str
    stats: ImportStats


class ReferenceLinePydModel(BaseModel):
    """Reference line API response."""

    model_config = ConfigDict(from_attributes=True)

    row_id: int
    category: str
    vessel_type_id: int
    size: str | None = None
    traj: str | None = None
    a: float
    b: float
    c: float
    d: float
    e: float
