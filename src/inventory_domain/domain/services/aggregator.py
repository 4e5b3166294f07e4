# src/inventory_domain/domain/services/aggregator.py
"""Domain service that consolidates duplicate inventory records."""

import logging
from typing import Iterable

from src.inventory_domain.domain.entities.record import Record

logger = logging.getLogger(__name__)


def aggregate(records: Iterable[Record]) -> list[Record]:
    """
    Collapses records sharing (name, code, expiration) into one record with the summed quantity.

    Groups are emitted in the order of their first occurrence in the input.
    The input is not modified; merged groups are new Record instances.
    """
    groups: dict[tuple[str, str, str], Record] = {}  # insertion order == first occurrence
    total_in = 0

    for record in records:
        total_in += 1
        key = record.grouping_key
        existing = groups.get(key)
        groups[key] = record if existing is None else existing.merged_with(record)

    logger.debug(f"Aggregated {total_in} records into {len(groups)} groups")
    return list(groups.values())
