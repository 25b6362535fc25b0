"""
Quarterly baseline deviation reporter.

Combines the reference lookup, the baseline calculator and the quarter
aggregator into one deviation record per vessel per quarter.
"""
import logging
import math
from datetime import datetime
from typing import Iterable, Optional

from emissions_tracker.pydantic_models.deviation import QuarterlyDeviation
from emissions_tracker.pydantic_models.snapshot import (
    ReferenceCoefficientRow,
    VesselSnapshot,
)
from emissions_tracker.services.aggregators.quarter_aggregator import QuarterAggregator
from emissions_tracker.services.calculators.baseline_calculator import (
    BaselineCalculator,
    BaselineEvaluationError,
)
from emissions_tracker.services.selectors.reference_curve_selector import (
    ReferenceCurveQuery,
    ReferenceCurveRepository,
)
from emissions_tracker.utils.constants import DEFAULT_DWT, ReferenceCategory
from emissions_tracker.utils.datetime_utils import as_utc, to_iso_utc


class MissingReferenceData(LookupError):
    """Raised when a vessel's type has no reference rows in the category."""

    def __init__(self, vessel: VesselSnapshot, category: str):
        self.vessel = vessel
        self.category = category
        super().__init__(
            f"No {category} factors found for vessel {vessel.name} "
            f"({vessel.imo_no}) with type {vessel.vessel_type}"
        )


def percentage_deviation(actual: float, baseline: float) -> float:
    """
    Signed deviation of ``actual`` from ``baseline`` in percent.

    A baseline that is not a positive finite number leaves the deviation
    undefined; it is reported as 0.0.
    """
    if not (math.isfinite(baseline) and baseline > 0):
        return 0.0
    deviation = (actual - baseline) / baseline * 100
    return deviation if math.isfinite(deviation) else 0.0


class DeviationReporter:
    """
    Computes quarterly deviations across a fleet snapshot.

    Holds no state between calls; every call derives its result from the
    snapshot it is given.
    """

    def __init__(
        self,
        calculator: Optional[BaselineCalculator] = None,
        aggregator: Optional[QuarterAggregator] = None,
        category: str = ReferenceCategory.POSEIDON_PRINCIPLES,
        default_dwt: float = DEFAULT_DWT,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.calculator = calculator or BaselineCalculator(logger=self.logger)
        self.aggregator = aggregator or QuarterAggregator(logger=self.logger)
        self.category = category
        self.default_dwt = default_dwt

    def compute_all(
        self,
        vessels: Iterable[VesselSnapshot],
        reference_repo: ReferenceCurveRepository,
        calculator: Optional[BaselineCalculator] = None,
    ) -> list[QuarterlyDeviation]:
        """
        Compute one deviation per (vessel, quarter) and sort by date.

        Vessels without reference rows, or whose deadweight and curves give
        no finite baseline, are skipped with a warning. The sort is stable,
        so records sharing a date keep vessel-then-quarter order.

        Args:
            vessels: Vessel snapshots with their emission records
            reference_repo: Reference dataset snapshot
            calculator: Overrides the reporter's calculator for this call

        Returns:
            List of QuarterlyDeviation ordered ascending by date
        """
        calculator = calculator or self.calculator
        self.logger.info("Calculating quarterly deviations...")

        dated: list[tuple[datetime, QuarterlyDeviation]] = []
        for vessel in vessels:
            try:
                rows = self._reference_rows_for(vessel, reference_repo)
                vessel_results = self._vessel_deviations(vessel, rows, calculator)
            except MissingReferenceData as e:
                self.logger.warning(str(e))
                continue
            except BaselineEvaluationError as e:
                self.logger.warning(
                    f"Skipping vessel {vessel.name} ({vessel.imo_no}): {e}"
                )
                continue

            dated.extend(vessel_results)

        dated.sort(key=lambda item: item[0])
        deviations = [deviation for _, deviation in dated]

        self.logger.info(f"Calculated {len(deviations)} quarterly deviations")
        return deviations

    def list_vessels_summary(
        self, vessels: Iterable[VesselSnapshot]
    ) -> list[tuple[VesselSnapshot, int]]:
        """Pair every vessel with the number of emission records it owns."""
        return [(vessel, len(vessel.emissions)) for vessel in vessels]

    def _reference_rows_for(
        self, vessel: VesselSnapshot, reference_repo: ReferenceCurveRepository
    ) -> frozenset[ReferenceCoefficientRow]:
        query = ReferenceCurveQuery(
            vessel_type_id=vessel.vessel_type, category=self.category
        )
        rows = reference_repo.find_matching(query)
        if not rows:
            raise MissingReferenceData(vessel, self.category)
        return rows

    def _vessel_deviations(
        self,
        vessel: VesselSnapshot,
        rows: frozenset[ReferenceCoefficientRow],
        calculator: BaselineCalculator,
    ) -> list[tuple[datetime, QuarterlyDeviation]]:
        dwt = vessel.dwt or self.default_dwt
        results = []

        for key, bucket in self.aggregator.group_by_quarter(vessel.emissions).items():
            closing = self.aggregator.representative(bucket)
            if closing is None:
                continue

            baseline = float(calculator.evaluate(rows, key.year, dwt).min)
            actual = closing.tot_co2

            deviation = QuarterlyDeviation(
                vessel_id=vessel.imo_no,
                vessel_name=vessel.name,
                quarter=key.label,
                year=key.year,
                actual_emissions=actual,
                baseline=baseline,
                deviation=percentage_deviation(actual, baseline),
                date=to_iso_utc(closing.to_utc),
            )
            results.append((as_utc(closing.to_utc), deviation))

        return results
