"""Utility functions for date manipulation."""

import re
from datetime import date, datetime

import pytz

# Exactly yyyy-mm-dd; date.fromisoformat alone also accepts forms like "20240101".
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(date_str: str) -> date:
    """
    Parses a strict ISO calendar date (yyyy-mm-dd).

    Raises:
        ValueError: if the string is not a valid calendar date in that form.
    """
    if not isinstance(date_str, str):
        raise ValueError(f"Expected an ISO date string, got {type(date_str).__name__}")
    candidate = date_str.strip()
    if not _ISO_DATE_PATTERN.match(candidate):
        raise ValueError(f"'{date_str}' is not in yyyy-mm-dd form")
    return date.fromisoformat(candidate)


def is_iso_date(date_str: str) -> bool:
    """Returns True if the string parses as a strict ISO calendar date."""
    try:
        parse_iso_date(date_str)
    except ValueError:
        return False
    return True


def today_in_timezone(tz_name: str) -> date:
    """Returns the current calendar date in the given IANA time zone."""
    return datetime.now(pytz.timezone(tz_name)).date()
