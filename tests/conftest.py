# tests/conftest.py
import pytest
from unittest.mock import Mock

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import IngestionReportDTO, SkippedRowDTO
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.domain.entities.record import Record
from src.inventory_domain.domain.repositories.record_source import IRecordSource
from src.inventory_domain.domain.services.query_engine import QueryEngine


@pytest.fixture(autouse=True)
def mock_settings_input_defaults(mocker) -> None:
    """Pins reader and timezone settings so a local .env cannot change test behaviour."""
    mocker.patch.object(settings, "CSV_DELIMITER", ",")
    mocker.patch.object(settings, "CSV_ENCODING", "utf-8")
    mocker.patch.object(settings, "CSV_HAS_HEADER", True)
    mocker.patch.object(settings, "VALIDATE_EXPIRATION_ON_INGEST", True)
    mocker.patch.object(settings, "TIMEZONE", "Europe/Vilnius")


@pytest.fixture
def sample_raw_records() -> list[Record]:
    """Raw rows as read from a file, with duplicates of milk and butter."""
    return [
        Record(name="Milk", code="111", quantity=2, expiration="2025-03-01"),
        Record(name="Butter", code="333", quantity=0, expiration="2025-05-20"),
        Record(name="Milk", code="111", quantity=3, expiration="2025-03-01"),
        Record(name="Cheese", code="444", quantity=4, expiration="2025-01-31"),
        Record(name="Milk", code="111", quantity=5, expiration="2025-04-01"),
        Record(name="Butter", code="333", quantity=7, expiration="2025-05-20"),
        Record(name="Apple", code="555", quantity=1, expiration="2024-12-30"),
    ]


@pytest.fixture
def sample_consolidated_records() -> list[Record]:
    """Expected aggregate of sample_raw_records, in first-occurrence order."""
    return [
        Record(name="Milk", code="111", quantity=5, expiration="2025-03-01"),
        Record(name="Butter", code="333", quantity=7, expiration="2025-05-20"),
        Record(name="Cheese", code="444", quantity=4, expiration="2025-01-31"),
        Record(name="Milk", code="111", quantity=5, expiration="2025-04-01"),
        Record(name="Apple", code="555", quantity=1, expiration="2024-12-30"),
    ]


@pytest.fixture
def query_engine(sample_consolidated_records) -> QueryEngine:
    return QueryEngine(sample_consolidated_records)


@pytest.fixture
def sample_ingestion_report(sample_raw_records) -> IngestionReportDTO:
    return IngestionReportDTO(
        records=list(sample_raw_records),
        skipped_rows=[SkippedRowDTO(line_number=4, line="Broken,row", reason="expected 4 fields, found 2")],
    )


@pytest.fixture
def mock_record_source(sample_ingestion_report) -> Mock:
    """Mock for IRecordSource returning the sample report."""
    source = Mock(spec=IRecordSource)
    source.read_records.return_value = sample_ingestion_report
    return source


@pytest.fixture
def inventory_service(mock_record_source) -> InventoryApplicationService:
    """Instance of InventoryApplicationService with a mocked record source."""
    return InventoryApplicationService(record_source=mock_record_source)


@pytest.fixture
def loaded_inventory_service(inventory_service) -> InventoryApplicationService:
    inventory_service.load()
    return inventory_service
