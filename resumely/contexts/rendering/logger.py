"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from resumely.contexts.rendering.defaults import DEFAULT_FONTS, DEFAULT_LAYOUT, PLACEHOLDERS_ENABLED
from resumely.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, record_path: Optional[Path] = None, layout: Optional[str] = None
) -> Path:
    """
    Setup logger for a rendering session.

    The log header records the settings a render depends on: the requested
    layout (or the template fallback), whether placeholders are on, and fonts.

    Args:
        log_dir: Directory for this rendering session
        record_path: Resume record being rendered, if rendering from a file
        layout: Layout requested on the command line, if any

    Returns:
        Path to log file
    """
    fonts = DEFAULT_FONTS
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        header={
            "Record": record_path,
            "Layout": layout or f"from template (fallback {DEFAULT_LAYOUT})",
            "Placeholders": "on" if PLACEHOLDERS_ENABLED else "off",
            "Fonts": f"{fonts.regular_path or fonts.regular} / {fonts.bold_path or fonts.bold}",
        },
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, layout: str, section_counts: dict) -> None:
    """Log start of a render with the populated section counts."""
    _log_info(f"Rendering: {resume_name} ({layout})")
    for section, count in section_counts.items():
        _log_debug(f"  {section}: {count}")


def log_render_result(resume_name: str, num_bytes: int, final_y: float, elapsed_time: float) -> None:
    """
    Log a finished render.

    Content that ran below the page edge is not an error on a single-page
    document, but it is worth a warning.
    """
    _log_success(f"{resume_name}: {num_bytes} bytes ({elapsed_time:.2f}s)")
    if final_y < 0:
        _log_warning(f"{resume_name}: content overflowed the page by {-final_y:.0f}pt")


def log_render_failure(resume_name: str, error: Exception) -> None:
    _log_error(f"PDF generation failed for {resume_name}: {type(error).__name__}: {error}")
