"""
Pydantic models for quarterly deviation results.

Serialized with camelCase keys for API consumers.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class QuarterlyDeviation(CamelModel):
    """Deviation of one vessel's representative emissions for one quarter."""

    vessel_id: str = Field(..., description="Vessel IMO number", examples=["9321483"])
    vessel_name: str = Field(..., examples=["Nordic Star"])
    quarter: str = Field(..., pattern=r"^Q[1-4]$", examples=["Q1"])
    year: int = Field(..., examples=[2023])
    actual_emissions: float = Field(
        ..., description="Total CO2 of the representative record (t)", examples=[120.0]
    )
    baseline: float = Field(
        ..., description="Minimum baseline across matching reference rows", examples=[100.0]
    )
    deviation: float = Field(
        ...,
        description="(actual - baseline) / baseline * 100, or 0 when baseline <= 0",
        examples=[20.0],
    )
    date: str = Field(
        ..., description="ISO-8601 end of the representative record", examples=["2023-03-28T00:00:00.000Z"]
    )


class VesselSummary(CamelModel):
    """Vessel fields with the number of emission records it owns."""

    model_config = ConfigDict(from_attributes=True)

    imo_no: str
    name: str
    vessel_type: int
    dwt: float | None = None
    emission_record_count: int = Field(..., ge=0)
