"""
Baseline curve families.

A curve maps (year, deadweight) to an expected emissions value using the five
coefficients a..e of a reference row. All arithmetic is done in Decimal.

The authoritative regulatory formula behind the reference dataset is not part
of the dataset itself, so the family is selected by name from configuration.
"""
from decimal import Decimal
from typing import Protocol

from emissions_tracker.pydantic_models.snapshot import ReferenceCoefficientRow
from emissions_tracker.utils.constants import CurveFamily


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert via str so binary float noise is not carried into Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class UnknownCurveFamily(KeyError):
    """Raised when a curve family name is not registered."""


class BaselineCurve(Protocol):
    name: str

    def evaluate(
        self, row: ReferenceCoefficientRow, year: int, dwt: Decimal
    ) -> Decimal:
        ...


class CubicYearPowerDwtCurve:
    """
    f = (a*Y^3 + b*Y^2 + c*Y + d) * DWT^e

    A cubic trend over the calendar year scaled by a power law in deadweight.
    """

    name = CurveFamily.CUBIC_YEAR_POWER_DWT

    def evaluate(
        self, row: ReferenceCoefficientRow, year: int, dwt: Decimal
    ) -> Decimal:
        y = Decimal(year)
        a, b, c, d, e = (to_decimal(v) for v in (row.a, row.b, row.c, row.d, row.e))
        trend = a * y**3 + b * y**2 + c * y + d
        return trend * (dwt**e)


class ReductionPowerLawCurve:
    """
    f = a * DWT^(-c) * (1 - b * (Y - d) / 100) + e

    CII-style reference line a*DWT^-c, reduced by b percent per year after
    base year d, plus a constant offset e.
    """

    name = CurveFamily.REDUCTION_POWER_LAW

    def evaluate(
        self, row: ReferenceCoefficientRow, year: int, dwt: Decimal
    ) -> Decimal:
        a, b, c, d, e = (to_decimal(v) for v in (row.a, row.b, row.c, row.d, row.e))
        reference = a * (dwt ** -c)
        reduction = Decimal(1) - b * (Decimal(year) - d) / Decimal(100)
        return reference * reduction + e


CURVE_FAMILIES: dict[str, type] = {
    CubicYearPowerDwtCurve.name: CubicYearPowerDwtCurve,
    ReductionPowerLawCurve.name: ReductionPowerLawCurve,
}


def get_curve(name: str) -> BaselineCurve:
    """
    Instantiate a registered curve family.

    Raises:
        UnknownCurveFamily: If ``name`` is not registered
    """
    try:
        return CURVE_FAMILIES[name]()
    except KeyError:
        raise UnknownCurveFamily(
            f"Unknown curve family: {name}. Must be one of: {list(CURVE_FAMILIES)}"
        ) from None
