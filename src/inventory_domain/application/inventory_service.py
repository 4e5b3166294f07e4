# src/inventory_domain/application/inventory_service.py
"""Application service for loading, consolidating and querying inventory records."""

import logging
from datetime import date

from src.common.dtos.inventory_dtos import IngestionReportDTO
from src.common.utils.date_utils import parse_iso_date
from src.inventory_domain.domain.entities.record import Record
from src.inventory_domain.domain.repositories.record_source import IRecordSource
from src.inventory_domain.domain.services.aggregator import aggregate
from src.inventory_domain.domain.services.query_engine import QueryEngine

logger = logging.getLogger(__name__)


class InventoryApplicationService:
    """Owns the consolidated inventory for one run and answers queries over it."""

    def __init__(self, record_source: IRecordSource) -> None:
        """Initializes the InventoryApplicationService."""
        self.record_source = record_source
        self._engine = QueryEngine(())

    @property
    def records(self) -> tuple[Record, ...]:
        """The consolidated records; empty until load() has run."""
        return self._engine.records

    def load(self) -> IngestionReportDTO:
        """
        Reads the source and consolidates duplicate entries.

        Raises:
            IngestionError: if the source cannot be read.
        """
        report = self.record_source.read_records()
        consolidated = aggregate(report.records)
        self._engine = QueryEngine(consolidated)

        logger.info(
            f"Loaded {len(report.records)} rows into {len(consolidated)} unique items"
            f" ({len(report.skipped_rows)} rows skipped)."
        )
        return report

    def below_quantity(self, threshold: int | str) -> list[Record]:
        """Items with quantity strictly below the threshold, sorted by name."""
        return self._engine.below_quantity(threshold)

    def before_date(self, cutoff: date | str) -> list[Record]:
        """Items expiring strictly before the cutoff, sorted by name."""
        return self._engine.before_date(cutoff)

    def get_inventory_statistics(self) -> dict:
        """Returns summary figures about the consolidated inventory."""
        records = self.records
        expirations = []
        for record in records:
            try:
                expirations.append(parse_iso_date(record.expiration))
            except ValueError:
                continue

        return {
            "total_unique_items": len(records),
            "total_units": sum(r.quantity for r in records),
            "earliest_expiration": min(expirations).isoformat() if expirations else None,
            "latest_expiration": max(expirations).isoformat() if expirations else None,
        }
