"""Data Transfer Objects for inventory ingestion."""

from dataclasses import dataclass, field

from src.inventory_domain.domain.entities.record import Record


@dataclass(frozen=True)
class SkippedRowDTO:
    """DTO describing one input line that was rejected during ingestion."""

    line_number: int
    line: str
    reason: str


@dataclass
class IngestionReportDTO:
    """DTO for the result of reading an inventory source: parsed records plus rejected lines."""

    records: list[Record] = field(default_factory=list)
    skipped_rows: list[SkippedRowDTO] = field(default_factory=list)
