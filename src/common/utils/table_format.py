"""Fixed-width table formatting for inventory output."""

from typing import Iterable

from src.inventory_domain.domain.entities.record import Record

# name (left, 16) | code (right, 20) | quantity (right, 6) | expiration (right, 10)
ROW_FORMAT = "%-16s %20s %6d %10s"


def format_record_row(record: Record) -> str:
    return ROW_FORMAT % record.as_row()


def format_record_table(records: Iterable[Record]) -> list[str]:
    return [format_record_row(r) for r in records]
