"""
Shared utilities for Resumely.

Common functionality used across contexts:
- Logger setup
- Date parsing and formatting
- PDF text extraction
"""

from resumely.utils.timestamp import format_month_year, now, parse_date, today

__all__ = ["format_month_year", "now", "parse_date", "today"]
