# src/inventory_domain/infrastructure/readers/csv_record_source.py
"""Delimited-file implementation of the inventory record source."""

import logging
from pathlib import Path

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import IngestionReportDTO, SkippedRowDTO
from src.common.exceptions.custom_exceptions import IngestionError
from src.common.utils.date_utils import is_iso_date
from src.inventory_domain.domain.entities.record import FIELD_COUNT, Record
from src.inventory_domain.domain.repositories.record_source import IRecordSource

logger = logging.getLogger(__name__)


class CsvRecordSource(IRecordSource):
    """
    Reads `name<sep>code<sep>quantity<sep>expiration` lines from a file.

    Lines are split on the delimiter as-is; quoting is not interpreted.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        delimiter: str | None = None,
        encoding: str | None = None,
        skip_header: bool | None = None,
        validate_expiration: bool | None = None,
    ) -> None:
        self.path = Path(path if path is not None else settings.INVENTORY_CSV_PATH)
        self.delimiter = delimiter if delimiter is not None else settings.CSV_DELIMITER
        self.encoding = encoding if encoding is not None else settings.CSV_ENCODING
        self.skip_header = skip_header if skip_header is not None else settings.CSV_HAS_HEADER
        self.validate_expiration = (
            validate_expiration if validate_expiration is not None else settings.VALIDATE_EXPIRATION_ON_INGEST
        )

    def read_records(self) -> IngestionReportDTO:
        """Parses the file into Records, collecting every rejected line with its reason."""
        report = IngestionReportDTO()

        try:
            with self.path.open("r", encoding=self.encoding, newline="") as f:
                for line_number, raw_line in enumerate(f, 1):
                    if line_number == 1 and self.skip_header:
                        continue
                    line = raw_line.rstrip("\r\n")
                    if not line.strip():
                        continue

                    reason = self._parse_line(line, report)
                    if reason:
                        skipped = SkippedRowDTO(line_number=line_number, line=line, reason=reason)
                        report.skipped_rows.append(skipped)
                        logger.warning(f"Skipping line {line_number} ({reason}): {line}")
        except FileNotFoundError as e:
            raise IngestionError(f"Inventory file not found: {self.path}", original_exception=e, path=str(self.path))
        except UnicodeDecodeError as e:
            raise IngestionError(
                f"Inventory file {self.path} is not valid {self.encoding}", original_exception=e, path=str(self.path)
            )
        except OSError as e:
            raise IngestionError(f"Error reading data from {self.path}", original_exception=e, path=str(self.path))

        logger.info(
            f"Read {len(report.records)} records from {self.path} ({len(report.skipped_rows)} lines skipped)"
        )
        return report

    def _parse_line(self, line: str, report: IngestionReportDTO) -> str | None:
        """Appends the parsed record to the report; returns a rejection reason instead if the line is malformed."""
        fields = line.split(self.delimiter)
        if len(fields) != FIELD_COUNT:
            return f"expected {FIELD_COUNT} fields, found {len(fields)}"

        try:
            record = Record.from_fields(fields)
        except ValueError as e:
            return str(e)

        if self.validate_expiration and not is_iso_date(record.expiration):
            return f"expiration '{record.expiration}' is not a yyyy-mm-dd date"

        report.records.append(record)
        return None
