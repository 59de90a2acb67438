"""
Rendering Context

Responsibilities:
- Normalizes resume records into a read-only render model
- Lays out sections on a single A4 page (single-column or two-column)
- Serializes the page into in-memory PDF bytes
- Derives download filenames and headers for the HTTP layer

Owns: Layout, typography, placeholder content, PDF generation
Never: Persists records or writes files
"""

from resumely.contexts.rendering.assembler import embed_fonts, generate_pdf
from resumely.contexts.rendering.defaults import (
    DEFAULT_PLACEHOLDERS,
    SINGLE_COLUMN,
    TWO_COLUMN,
    FontPair,
    Placeholders,
    get_layout,
    layout_for_template,
)
from resumely.contexts.rendering.download import attachment_filename, download_headers
from resumely.contexts.rendering.exceptions import RenderError
from resumely.contexts.rendering.render_model import RenderModel, build_render_model

__all__ = [
    # Entry point
    "generate_pdf",
    "RenderError",
    # Normalization
    "build_render_model",
    "RenderModel",
    "Placeholders",
    "DEFAULT_PLACEHOLDERS",
    # Layouts and fonts
    "SINGLE_COLUMN",
    "TWO_COLUMN",
    "get_layout",
    "layout_for_template",
    "FontPair",
    "embed_fonts",
    # HTTP download helpers
    "attachment_filename",
    "download_headers",
]
