"""Custom exceptions for the rendering context."""

from typing import Optional


class RenderError(Exception):
    """
    Exception raised when a resume cannot be rendered to PDF.

    Raised once, at the generate_pdf() boundary, for any failure while
    normalizing the record, setting up fonts, drawing, or serializing.

    Attributes:
        message: Error description
        resume_name: Display name of the resume being rendered
        layout: Layout name in use when the failure happened
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        resume_name: Optional[str] = None,
        layout: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.resume_name = resume_name
        self.layout = layout
        self.original_error = original_error

        parts = [message]

        if resume_name:
            parts.append(f"\nResume: {resume_name}")
        if layout:
            parts.append(f"Layout: {layout}")

        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
