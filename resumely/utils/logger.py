"""
Shared loguru setup.

Each context owns its message wrappers (contexts/{context}/logger.py); this
module only wires sinks and writes the run header that opens every log file.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

import resumely

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors; the file sink is plain text
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

RULE = "=" * 72


def add_sinks(log_file: Path, console_level: str = "INFO") -> None:
    """Replace existing handlers with a DEBUG file sink and a colored console sink."""
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)


def log_run_header(fields: Dict[str, Any]) -> None:
    """
    Log an aligned key/value block describing this run.

    Always includes the resumely version and the command line; fields are
    appended in the given order, and None values are shown as "-".
    """
    header = {
        "resumely": resumely.__version__,
        "Command": " ".join(sys.argv),
        "Python": sys.version.split()[0],
        **fields,
    }
    width = max(len(key) for key in header)

    logger.info(RULE)
    for key, value in header.items():
        logger.info(f"{key:<{width}} : {'-' if value is None else value}")
    logger.info(RULE)


def setup_logger(
    context_name: str,
    log_dir: Path,
    header: Optional[Dict[str, Any]] = None,
) -> Path:
    """
    Start a logging session for one context.

    Args:
        context_name: Context identifier; names the log file ("render" -> render.log)
        log_dir: Directory for this session (created if missing)
        header: Context-specific run settings for the log header

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    add_sinks(log_file)
    log_run_header(header or {})

    return log_file
