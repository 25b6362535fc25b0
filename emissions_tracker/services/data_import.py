"""
Import of externally supplied vessel, reference and emission snapshots.

Usage:
    from emissions_tracker.services.data_import import DataImportService

    async with DataImportService(data_dir="data") as importer:
        stats = await importer.import_all()

Each snapshot file may be JSON (a list of objects) or CSV with the same
column names. A malformed record is skipped with a warning and never aborts
the batch.
"""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from emissions_tracker.database.repositories import (
    EmissionLogRepository,
    ReferenceLineRepository,
    VesselRepository,
)
from emissions_tracker.database.session_manager.db_session import Database
from emissions_tracker.pydantic_models.data_import import (
    EmissionImport,
    ImportStats,
    ReferenceLineImport,
    VesselImport,
)
from emissions_tracker.utils.constants import DEFAULT_DWT

logger = logging.getLogger(__name__)


class MalformedRecord(ValueError):
    """A single source record that cannot be imported."""

    def __init__(self, source: str, index: int, reason: str):
        self.source = source
        self.index = index
        self.reason = reason
        super().__init__(f"{source} record #{index}: {reason}")


class DataImportService:
    """Service for importing snapshot files into the database."""

    def __init__(
        self,
        session: AsyncSession | None = None,
        data_dir: str | Path = "data",
        vessels_file: str = "vessels.json",
        reference_file: str = "pp-reference.json",
        emissions_file: str = "daily-log-emissions.json",
        default_dwt: float = DEFAULT_DWT,
    ):
        """
        Initialize the import service.

        Args:
            session: Optional async database session. If not provided, will create one.
            data_dir: Directory containing the snapshot files
            vessels_file: Vessel snapshot file name
            reference_file: Reference line snapshot file name
            emissions_file: Daily log emission snapshot file name
            default_dwt: Deadweight for new vessels whose source has none
        """
        self._session = session
        self._external_session = session is not None
        self.data_dir = Path(data_dir)
        self.vessels_file = vessels_file
        self.reference_file = reference_file
        self.emissions_file = emissions_file
        self.default_dwt = default_dwt

        if not self.data_dir.exists():
            raise ValueError(f"Data directory not found: {self.data_dir}")

    @classmethod
    def from_config(
        cls, settings: dict[str, Any], session: AsyncSession | None = None
    ) -> "DataImportService":
        """Build from a [data_import] config section."""
        return cls(
            session=session,
            data_dir=settings.get("data_dir", "data"),
            vessels_file=settings.get("vessels_file", "vessels.json"),
            reference_file=settings.get("reference_file", "pp-reference.json"),
            emissions_file=settings.get("emissions_file", "daily-log-emissions.json"),
        )

    async def __aenter__(self):
        """Context manager entry."""
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    async def import_all(self) -> ImportStats:
        """
        Import vessels, then reference lines, then daily log emissions.

        Returns:
            ImportStats with per-kind counts and skipped-record messages
        """
        logger.info("Starting data import...")
        stats = ImportStats()

        try:
            stats.vessels = await self.import_vessels(stats)
            stats.reference_lines = await self.import_reference_lines(stats)
            stats.emissions = await self.import_daily_emissions(stats)
            await self.session.commit()
        except Exception as e:
            logger.error(f"Data import failed: {e}", exc_info=True)
            await self.session.rollback()
            raise

        logger.info(
            f"Data import completed: {stats.vessels} vessels, "
            f"{stats.reference_lines} reference lines, {stats.emissions} emissions, "
            f"{stats.skipped} skipped"
        )
        return stats

    async def import_vessels(self, stats: ImportStats) -> int:
        """Upsert vessels by IMO number."""
        repo = VesselRepository(self.session)
        count = 0

        for _, vessel in self._parse_records(self.vessels_file, VesselImport, stats):
            await repo.upsert_vessel(
                imo_no=vessel.imo_no,
                name=vessel.name,
                vessel_type=vessel.vessel_type,
                dwt=vessel.dwt,
                default_dwt=self.default_dwt,
            )
            count += 1

        logger.info(f"Imported {count} vessels")
        return count

    async def import_reference_lines(self, stats: ImportStats) -> int:
        """Replace the reference dataset with the contents of the reference file."""
        path = self._resolve(self.reference_file)
        if path is None:
            logger.warning(f"Reference file not found in {self.data_dir}, keeping existing dataset")
            return 0

        rows = [
            row.model_dump()
            for _, row in self._parse_records(self.reference_file, ReferenceLineImport, stats)
        ]
        # Last row wins for duplicate row ids
        deduplicated = list({row["row_id"]: row for row in rows}.values())
        await ReferenceLineRepository(self.session).replace_all(deduplicated)

        logger.info(f"Imported {len(deduplicated)} reference lines")
        return len(deduplicated)

    async def import_daily_emissions(self, stats: ImportStats) -> int:
        """Upsert emission records by (eid, log_id)."""
        vessel_repo = VesselRepository(self.session)
        emission_repo = EmissionLogRepository(self.session)
        known_vessels = {vessel.imo_no for vessel in await vessel_repo.get_all(limit=None)}
        count = 0

        for index, emission in self._parse_records(
            self.emissions_file, EmissionImport, stats
        ):
            if emission.vessel_id not in known_vessels:
                self._skip(
                    stats,
                    MalformedRecord(
                        self.emissions_file,
                        index,
                        f"unknown vessel {emission.vessel_id} for EID {emission.eid}",
                    ),
                )
                continue

            await emission_repo.upsert(**emission.model_dump())
            count += 1

        logger.info(f"Imported {count} daily emissions")
        return count

    def _resolve(self, file_name: str) -> Optional[Path]:
        """Find the snapshot file, accepting a .csv with the same stem instead."""
        path = self.data_dir / file_name
        if path.exists():
            return path
        csv_path = path.with_suffix(".csv")
        if csv_path.exists():
            return csv_path
        return None

    def _read_raw(self, path: Path) -> list[dict[str, Any]]:
        if path.suffix == ".csv":
            with open(path, "r", newline="") as f:
                return list(csv.DictReader(f))

        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of records in {path}")
        return data

    def _parse_records(
        self, file_name: str, model: type[BaseModel], stats: ImportStats
    ) -> Iterator[tuple[int, Any]]:
        """Yield (source index, validated record), skipping malformed ones."""
        path = self._resolve(file_name)
        if path is None:
            logger.warning(f"File not found: {self.data_dir / file_name}")
            return

        logger.info(f"Loading {model.__name__} records from {path}")
        for index, raw in enumerate(self._read_raw(path)):
            try:
                yield index, self._validate(path.name, index, raw, model)
            except MalformedRecord as e:
                self._skip(stats, e)

    @staticmethod
    def _validate(source: str, index: int, raw: Any, model: type[BaseModel]) -> Any:
        if not isinstance(raw, dict):
            raise MalformedRecord(source, index, "record is not an object")
        try:
            return model.model_validate(raw)
        except (ValidationError, TypeError) as e:
            raise MalformedRecord(source, index, str(e)) from e

    @staticmethod
    def _skip(stats: ImportStats, error: MalformedRecord):
        logger.warning(f"Skipping malformed record: {error}")
        stats.skipped += 1
        stats.errors.append(str(error))
