"""
Baseline calculator.

Evaluates the candidate reference rows for a vessel into a baseline range.
"""
import logging
import math
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from typing import Iterable, Optional

from emissions_tracker.pydantic_models.snapshot import ReferenceCoefficientRow
from emissions_tracker.services.calculators.baseline_curves import (
    BaselineCurve,
    CubicYearPowerDwtCurve,
    to_decimal,
)


class NoMatchingCurve(ValueError):
    """
    Raised when the calculator is given no candidate rows.

    Callers check the reference lookup first, so this indicates a caller bug.
    """


class BaselineEvaluationError(ValueError):
    """
    Raised when a vessel's inputs cannot produce a finite baseline.

    Covers a non-positive deadweight and curve values that overflow float.
    The error concerns one vessel only; batch callers skip that vessel.
    """


@dataclass(frozen=True)
class BaselineRange:
    """Lowest and highest baseline across the evaluated rows."""

    min: Decimal
    max: Decimal


class BaselineCalculator:
    """
    Evaluates reference curves for a given year and deadweight.

    When several rows match (size brackets, trajectories) every row is
    evaluated and the range of results is returned.
    """

    def __init__(
        self,
        curve: Optional[BaselineCurve] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            curve: Curve family used to evaluate each row (cubic-year/power-dwt by default)
            logger: Logger for diagnostics, defaults to the module logger
        """
        self.curve = curve or CubicYearPowerDwtCurve()
        self.logger = logger or logging.getLogger(__name__)

    def evaluate(
        self,
        rows: Iterable[ReferenceCoefficientRow],
        year: int,
        dwt: float | int | Decimal,
    ) -> BaselineRange:
        """
        Evaluate every row and return the min/max baseline.

        Args:
            rows: Non-empty collection of matching reference rows
            year: Calendar year
            dwt: Vessel deadweight (positive)

        Returns:
            BaselineRange

        Raises:
            NoMatchingCurve: If ``rows`` is empty
            BaselineEvaluationError: If ``dwt`` is not positive or a curve value
                is not a finite float
        """
        candidates = list(rows)
        if not candidates:
            raise NoMatchingCurve(
                f"No reference rows to evaluate for year {year}, dwt {dwt}"
            )

        dwt_value = to_decimal(dwt)
        if not dwt_value.is_finite() or dwt_value <= 0:
            raise BaselineEvaluationError(f"Deadweight must be positive, got {dwt}")

        try:
            values = [self.curve.evaluate(row, year, dwt_value) for row in candidates]
        except DecimalException as e:
            raise BaselineEvaluationError(
                f"Curve evaluation failed for year {year}, dwt {dwt}: {e!r}"
            ) from e

        for value in values:
            if not math.isfinite(float(value)):
                raise BaselineEvaluationError(
                    f"Baseline {value} for year {year}, dwt {dwt} is not a finite number"
                )

        baseline = BaselineRange(min=min(values), max=max(values))
        self.logger.debug(
            f"Evaluated {len(candidates)} rows with {self.curve.name} for "
            f"year={year} dwt={dwt_value}: min={baseline.min} max={baseline.max}"
        )
        return baseline
