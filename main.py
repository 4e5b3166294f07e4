# main.py
"""Main application entry point for the interactive inventory checker."""

import logging
import sys
from typing import Callable

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import IngestionError, InvalidInputError
from src.common.logger_config import setup_logging
from src.common.utils.date_utils import today_in_timezone
from src.common.utils.table_format import format_record_table
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.infrastructure.readers.csv_record_source import CsvRecordSource

logger = logging.getLogger(__name__)

MENU_TEXT = "\n".join(
    [
        "",
        "============ Inventory actions ============",
        "[1] Show items below a quantity",
        "[2] Show items expired or expiring before a date",
        "[3] Exit",
        "===========================================",
    ]
)

CHOICE_BELOW_QUANTITY = 1
CHOICE_BEFORE_DATE = 2
CHOICE_EXIT = 3


def setup_dependencies(csv_path: str | None = None) -> InventoryApplicationService:
    """Initializes and wires up inventory domain dependencies."""
    record_source = CsvRecordSource(path=csv_path)
    return InventoryApplicationService(record_source=record_source)


def print_records(records: list, print_func: Callable[[str], None] = print) -> None:
    if not records:
        print_func("No matching items.")
        return
    for line in format_record_table(records):
        print_func(line)


def handle_below_quantity(
    service: InventoryApplicationService,
    input_func: Callable[[str], str] = input,
    print_func: Callable[[str], None] = print,
) -> None:
    print_func("Which remaining quantity should be checked?")
    answer = input_func("> ")
    try:
        result = service.below_quantity(answer)
    except InvalidInputError as e:
        logger.debug(f"Rejected threshold: {e}")
        print_func("The quantity should be a non-negative whole number.")
        return
    print_records(result, print_func)


def handle_before_date(
    service: InventoryApplicationService,
    input_func: Callable[[str], str] = input,
    print_func: Callable[[str], None] = print,
) -> None:
    print_func("Which expiration date should be checked? [yyyy-mm-dd, blank for today]")
    answer = input_func("> ").strip()
    cutoff = answer or today_in_timezone(settings.TIMEZONE)
    try:
        result = service.before_date(cutoff)
    except InvalidInputError as e:
        logger.debug(f"Rejected cutoff date: {e}")
        print_func("The date format should be [yyyy-mm-dd].")
        return
    print_records(result, print_func)


def run_menu(
    service: InventoryApplicationService,
    input_func: Callable[[str], str] = input,
    print_func: Callable[[str], None] = print,
) -> None:
    """Runs the interactive menu until the user exits or input ends."""
    handlers = {
        CHOICE_BELOW_QUANTITY: handle_below_quantity,
        CHOICE_BEFORE_DATE: handle_before_date,
    }

    while True:
        print_func(MENU_TEXT)
        try:
            answer = input_func("> ")
        except EOFError:
            return

        try:
            choice = int(answer.strip())
        except ValueError:
            print_func(f"The choice should be a whole number in the range [{CHOICE_BELOW_QUANTITY};{CHOICE_EXIT}].")
            continue

        if choice == CHOICE_EXIT:
            return

        handler = handlers.get(choice)
        if handler is None:
            print_func(f"The choice should fit the range [{CHOICE_BELOW_QUANTITY};{CHOICE_EXIT}].")
            continue

        try:
            handler(service, input_func, print_func)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Loads the inventory file and starts the menu. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    csv_path = argv[0] if argv else None
    service = setup_dependencies(csv_path)

    try:
        service.load()
    except IngestionError as e:
        logger.error(f"❌ {e}")
        return 1

    if not service.records:
        print("No products found.")
        return 0

    logger.info(f"Inventory statistics: {service.get_inventory_statistics()}")
    run_menu(service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
