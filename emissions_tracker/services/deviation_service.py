"""
Deviation service.

Loads a fleet snapshot from the database and runs the deviation reporter on
it. Each call fetches its own snapshot; nothing is cached between calls.
"""
import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.core.config import Config, get_environment_config
from emissions_tracker.database.repositories import (
    ReferenceLineRepository,
    VesselRepository,
)
from emissions_tracker.pydantic_models.deviation import QuarterlyDeviation, VesselSummary
from emissions_tracker.pydantic_models.snapshot import (
    ReferenceCoefficientRow,
    VesselSnapshot,
)
from emissions_tracker.services.calculators.baseline_calculator import BaselineCalculator
from emissions_tracker.services.calculators.baseline_curves import get_curve
from emissions_tracker.services.reporters.deviation_reporter import DeviationReporter
from emissions_tracker.services.selectors.reference_curve_selector import (
    ReferenceCurveRepository,
)
from emissions_tracker.utils.constants import (
    DEFAULT_DWT,
    CurveFamily,
    ReferenceCategory,
)

logger = logging.getLogger(__name__)


def build_reporter(config: Config) -> DeviationReporter:
    """Build a DeviationReporter from the [baseline] config section."""
    settings = config.section("baseline")
    curve = get_curve(settings.get("curve", CurveFamily.CUBIC_YEAR_POWER_DWT))
    return DeviationReporter(
        calculator=BaselineCalculator(curve=curve),
        category=settings.get("category", ReferenceCategory.POSEIDON_PRINCIPLES),
        default_dwt=settings.get("default_dwt", DEFAULT_DWT),
    )


class DeviationService:
    """Runs deviation reporting against the database."""

    def __init__(
        self,
        session: AsyncSession,
        config: Optional[Config] = None,
        reporter: Optional[DeviationReporter] = None,
    ):
        self.session = session
        self.reporter = reporter or build_reporter(config or get_environment_config())

    async def load_vessels(self) -> list[VesselSnapshot]:
        """Snapshot every vessel; a vessel whose stored data is invalid is skipped."""
        snapshots = []
        for vessel in await VesselRepository(self.session).get_all_with_emissions():
            try:
                snapshots.append(VesselSnapshot.model_validate(vessel))
            except ValidationError as e:
                logger.warning(
                    f"Skipping vessel {vessel.name} ({vessel.imo_no}) with invalid stored data: "
                    f"{e.error_count()} errors"
                )
        return snapshots

    async def load_reference_repo(self) -> ReferenceCurveRepository:
        rows = await ReferenceLineRepository(self.session).get_dataset()
        return ReferenceCurveRepository(
            ReferenceCoefficientRow.model_validate(row) for row in rows
        )

    async def get_quarterly_deviations(self) -> list[QuarterlyDeviation]:
        """Compute quarterly deviations for every vessel in the database."""
        vessels = await self.load_vessels()
        reference_repo = await self.load_reference_repo()
        logger.info(
            f"Loaded snapshot: {len(vessels)} vessels, {len(reference_repo)} reference rows"
        )
        return self.reporter.compute_all(vessels, reference_repo)

    async def get_vessel_summaries(self) -> list[VesselSummary]:
        """List every vessel with its emission record count."""
        vessels = await self.load_vessels()
        return [
            VesselSummary(
                imo_no=vessel.imo_no,
                name=vessel.name,
                vessel_type=vessel.vessel_type,
                dwt=vessel.dwt,
                emission_record_count=count,
            )
            for vessel, count in self.reporter.list_vessels_summary(vessels)
        ]
