"""
Records context logger.

Provides logging interface for the records context with automatic [records] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[records]"


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_value_defaulted(field_name: str, value: str, default) -> None:
    """Log a stored value that was not understood and replaced by a default."""
    if default is None:
        _log_warning(f"Unrecognized {field_name} {value!r}, leaving it out")
    else:
        _log_warning(f"Unrecognized {field_name} {value!r}, using {default.value}")


def log_item_skipped(section: str, item) -> None:
    _log_warning(f"Skipping {section} item of type {type(item).__name__}")
