"""
Service tests for baseline curve evaluation.
"""
from decimal import Decimal

import pytest

from emissions_tracker.services.calculators.baseline_calculator import (
    BaselineCalculator,
    BaselineEvaluationError,
    BaselineRange,
    NoMatchingCurve,
)
from emissions_tracker.services.calculators.baseline_curves import (
    CubicYearPowerDwtCurve,
    ReductionPowerLawCurve,
    UnknownCurveFamily,
    get_curve,
    to_decimal,
)
from emissions_tracker.test.factory.snapshot import ReferenceCoefficientRowFactory
from emissions_tracker.utils.constants import CurveFamily


def test_single_flat_row():
    """Test a constant curve yields the same min and max."""
    row = ReferenceCoefficientRowFactory(d=100.0)

    result = BaselineCalculator().evaluate([row], 2023, 80000)

    assert result == BaselineRange(min=Decimal("100"), max=Decimal("100"))


def test_min_and_max_across_rows():
    """Test two matching rows evaluating to 90 and 110."""
    rows = [
        ReferenceCoefficientRowFactory(d=90.0, traj="min"),
        ReferenceCoefficientRowFactory(d=110.0, traj="max"),
    ]

    result = BaselineCalculator().evaluate(rows, 2023, 80000)

    assert result.min == Decimal("90")
    assert result.max == Decimal("110")


def test_no_rows_raises():
    with pytest.raises(NoMatchingCurve):
        BaselineCalculator().evaluate([], 2023, 80000)


@pytest.mark.parametrize("dwt", [0, -1, -50000.0])
def test_non_positive_dwt_raises(dwt):
    row = ReferenceCoefficientRowFactory()

    with pytest.raises(ValueError, match="Deadweight must be positive"):
        BaselineCalculator().evaluate([row], 2023, dwt)


def test_cubic_year_term():
    """Test the year polynomial: c*Y + d with c=1, d=-2000 gives Y - 2000."""
    row = ReferenceCoefficientRowFactory(c=1.0, d=-2000.0)

    result = BaselineCalculator().evaluate([row], 2023, 80000)

    assert result.min == Decimal("23")


def test_dwt_power_term():
    """Test DWT^e scaling: 2 * 10000^0.5 = 200."""
    row = ReferenceCoefficientRowFactory(d=2.0, e=0.5)

    result = BaselineCalculator().evaluate([row], 2023, 10000)

    assert result.min == Decimal("200")


def test_evaluation_is_exact_decimal():
    """0.3 * 0.1 is exactly 0.03, without binary float noise."""
    row = ReferenceCoefficientRowFactory(d=0.3, e=1.0)

    result = BaselineCalculator().evaluate([row], 2023, 0.1)

    assert result.min == Decimal("0.03")
    assert 0.3 * 0.1 != 0.03


def test_evaluation_is_deterministic_and_pure():
    rows = [
        ReferenceCoefficientRowFactory(d=90.0),
        ReferenceCoefficientRowFactory(d=110.0),
    ]
    before = [row.model_copy() for row in rows]
    calculator = BaselineCalculator()

    first = calculator.evaluate(rows, 2023, 80000)
    second = calculator.evaluate(rows, 2023, 80000)

    assert first == second
    assert rows == before


def test_reduction_power_law_curve():
    """Test a*DWT^-c reduced by b percent per year since d: 1000 * (1 - 2*4/100)."""
    row = ReferenceCoefficientRowFactory(a=1000.0, b=2.0, c=0.0, d=2019.0, e=0.0)
    calculator = BaselineCalculator(curve=ReductionPowerLawCurve())

    result = calculator.evaluate([row], 2023, 80000)

    assert result.min == Decimal("920")


def test_reduction_power_law_offset():
    row = ReferenceCoefficientRowFactory(a=0.0, b=0.0, c=0.0, d=2019.0, e=5.5)

    value = ReductionPowerLawCurve().evaluate(row, 2023, Decimal(80000))

    assert value == Decimal("5.5")


def test_get_curve_by_name():
    assert isinstance(get_curve(CurveFamily.CUBIC_YEAR_POWER_DWT), CubicYearPowerDwtCurve)
    assert isinstance(get_curve(CurveFamily.REDUCTION_POWER_LAW), ReductionPowerLawCurve)


def test_get_curve_unknown_name():
    with pytest.raises(UnknownCurveFamily, match="Unknown curve family"):
        get_curve("quadratic")


def test_to_decimal_goes_through_str():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(Decimal("2.5")) == Decimal("2.5")
    assert to_decimal(3) == Decimal("3")


@pytest.mark.parametrize("dwt", [0, -1.5, float("nan"), float("inf")])
def test_invalid_dwt_is_a_per_vessel_error(dwt):
    row = ReferenceCoefficientRowFactory()

    with pytest.raises(BaselineEvaluationError):
        BaselineCalculator().evaluate([row], 2023, dwt)


def test_value_beyond_float_range_raises():
    """1 * 80000^80 is representable in Decimal but not as a float."""
    row = ReferenceCoefficientRowFactory(d=1.0, e=80.0)

    with pytest.raises(BaselineEvaluationError, match="not a finite number"):
        BaselineCalculator().evaluate([row], 2023, 80000)
