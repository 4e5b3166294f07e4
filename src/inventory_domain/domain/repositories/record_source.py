# inventory_domain/domain/repositories/record_source.py
"""Inventory record source interface."""
from abc import ABC, abstractmethod

from src.common.dtos.inventory_dtos import IngestionReportDTO


class IRecordSource(ABC):
    @abstractmethod
    def read_records(self) -> IngestionReportDTO:
        """Reads all inventory rows, returning parsed records and the rows that were rejected."""
        pass
