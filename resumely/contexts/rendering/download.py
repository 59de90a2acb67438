"""
Download helpers for the HTTP layer.

The web handler streams generate_pdf() output as a file attachment; these
helpers derive the filename and response headers from the resume name.
"""

import re
from typing import Dict

PDF_CONTENT_TYPE = "application/pdf"

_WHITESPACE = re.compile(r"\s+")


def attachment_filename(resume_name: str) -> str:
    """Resume name with each whitespace run replaced by "_", plus ".pdf"."""
    return f"{_WHITESPACE.sub('_', resume_name)}.pdf"


def download_headers(resume_name: str, pdf_bytes: bytes) -> Dict[str, str]:
    """
    Response headers for sending a rendered resume as a download.

    Example:
        >>> download_headers("Jane Doe CV", b"%PDF-1.4 ...")["Content-Disposition"]
        'attachment; filename="Jane_Doe_CV.pdf"'
    """
    return {
        "Content-Type": PDF_CONTENT_TYPE,
        "Content-Disposition": f'attachment; filename="{attachment_filename(resume_name)}"',
        "Content-Length": str(len(pdf_bytes)),
    }
