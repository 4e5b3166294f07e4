# src/inventory_domain/domain/services/query_engine.py
"""Read-only queries over the consolidated inventory."""

import logging
from datetime import date, datetime
from operator import attrgetter
from typing import Callable, Iterable

from src.common.exceptions.custom_exceptions import DataIntegrityError, InvalidInputError
from src.common.utils.date_utils import parse_iso_date
from src.inventory_domain.domain.entities.record import Record

logger = logging.getLogger(__name__)

# str ordering compares code points, so results do not depend on the process locale.
_by_name = attrgetter("name")


def parse_threshold(value: int | str | None) -> int:
    """
    Validates a quantity threshold.

    Accepts a non-negative int, or text holding one (as typed at a prompt).

    Raises:
        InvalidInputError: for None, bool, negative numbers and non-integer tokens.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError("Quantity threshold must be a non-negative integer", value=value)

    if isinstance(value, int):
        threshold = value
    elif isinstance(value, str):
        try:
            threshold = int(value.strip(), 10)
        except ValueError as e:
            raise InvalidInputError(
                f"Quantity threshold '{value}' is not an integer", value=value, original_exception=e
            ) from e
    else:
        raise InvalidInputError(
            f"Quantity threshold must be an integer, got {type(value).__name__}", value=value
        )

    if threshold < 0:
        raise InvalidInputError(f"Quantity threshold {threshold} is negative", value=value)
    return threshold


def parse_cutoff(value: date | str | None) -> date:
    """
    Validates a cutoff date given as a date or an ISO yyyy-mm-dd string.

    Raises:
        InvalidInputError: if the value is missing or does not parse.
    """
    # datetime is a date subclass; compare on the calendar date only
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value)
        except ValueError as e:
            raise InvalidInputError(
                f"Date '{value}' is not in yyyy-mm-dd form", value=value, original_exception=e
            ) from e
    raise InvalidInputError("Cutoff must be a calendar date in yyyy-mm-dd form", value=value)


def _expiration_of(record: Record) -> date:
    try:
        return parse_iso_date(record.expiration)
    except ValueError as e:
        raise DataIntegrityError(
            f"Record {record.name!r} ({record.code!r}) has unparsable expiration {record.expiration!r}",
            original_exception=e,
        ) from e


class QueryEngine:
    """Filter-and-sort queries over a consolidated record sequence. Holds no state between calls."""

    def __init__(self, records: Iterable[Record]) -> None:
        self._records: tuple[Record, ...] = tuple(records)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def _select(self, predicate: Callable[[Record], bool]) -> list[Record]:
        # sorted() is stable: equal names keep their consolidated order
        return sorted((r for r in self._records if predicate(r)), key=_by_name)

    def below_quantity(self, threshold: int | str) -> list[Record]:
        """Returns records with quantity strictly below the threshold, sorted by name."""
        limit = parse_threshold(threshold)
        result = self._select(lambda r: r.quantity < limit)
        logger.debug(f"below_quantity({limit}) matched {len(result)} of {len(self._records)} records")
        return result

    def before_date(self, cutoff: date | str) -> list[Record]:
        """
        Returns records expiring strictly before the cutoff, sorted by name.

        Records whose expiration cannot be parsed are logged and left out.
        """
        cutoff_date = parse_cutoff(cutoff)

        def expires_before(record: Record) -> bool:
            try:
                return _expiration_of(record) < cutoff_date
            except DataIntegrityError as e:
                logger.warning(f"Excluding record from date query: {e}")
                return False

        result = self._select(expires_before)
        logger.debug(f"before_date({cutoff_date.isoformat()}) matched {len(result)} of {len(self._records)} records")
        return result
