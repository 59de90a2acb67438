"""
Output serializer.

Creates the one-page canvas over an in-memory buffer and finalizes it into
PDF bytes. No file or network I/O happens here; writing the bytes somewhere
is the caller's business.
"""

from io import BytesIO
from typing import Tuple

from reportlab.pdfgen.canvas import Canvas

import resumely
from resumely.contexts.rendering.defaults import PAGE_HEIGHT, PAGE_WIDTH


def new_document(title: str) -> Tuple[Canvas, BytesIO]:
    """
    Open a single-page A4 canvas writing into a fresh buffer.

    The canvas runs in reportlab's invariant mode (fixed creation date and
    document id), so identical inputs serialize to identical bytes.

    Returns:
        (canvas, buffer)
    """
    buffer = BytesIO()
    canvas = Canvas(buffer, pagesize=(PAGE_WIDTH, PAGE_HEIGHT), invariant=1)
    canvas.setTitle(title)
    canvas.setAuthor(title)
    canvas.setCreator(f"resumely {resumely.__version__}")
    return canvas, buffer


def serialize(canvas: Canvas, buffer: BytesIO) -> bytes:
    """Close the page and the document and return the complete PDF bytes."""
    canvas.showPage()
    canvas.save()
    return buffer.getvalue()
