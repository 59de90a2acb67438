"""Timestamp and calendar date formatting utilities."""

from datetime import date, datetime
from typing import Optional, Union

# Fixed en-US month abbreviations so output never depends on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DateLike = Union[date, datetime, str]


def now() -> str:
    """Current local time as a compact sortable stamp (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current local date as "YYYY-MM-DD"."""
    return date.today().isoformat()


def parse_date(value: Optional[DateLike]) -> Optional[date]:
    """
    Coerce a stored date value to a date.

    Accepts date/datetime objects and ISO 8601 strings, including the
    trailing "Z" that JSON-serialized documents carry.

    Args:
        value: Date, datetime, ISO string, or None

    Returns:
        date instance, or None for None/blank input

    Raises:
        ValueError: If a non-blank string is not ISO 8601
        TypeError: If value is of an unsupported type
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        if len(text) == 7:
            # "YYYY-MM" month precision
            text = f"{text}-01"
        return datetime.fromisoformat(text).date()
    raise TypeError(f"Unsupported date value: {value!r}")


def format_month_year(value: Optional[date]) -> Optional[str]:
    """
    Format a date as "{Mon} {YYYY}" (e.g., "Mar 2021").

    Returns:
        Formatted string, or None when value is None
    """
    if value is None:
        return None
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def format_numeric_date(value: date) -> str:
    """Format a date as en-US "M/D/YYYY" without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"
