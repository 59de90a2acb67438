"""
Document assembler.

Lays out a single fixed-size A4 page top to bottom. There is no pagination:
content that does not fit runs below the page edge and is simply not visible.

generate_pdf() is the one entry point of the rendering context and its only
error boundary. Any failure while normalizing, setting up fonts, drawing, or
serializing is reported once, as a RenderError, and no partial output is
ever returned.
"""

import time
from datetime import date
from functools import partial
from typing import Any, Mapping, Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from resumely.contexts.records.resume_record import ResumeRecord
from resumely.contexts.rendering.defaults import (
    DEFAULT_FONTS,
    DEFAULT_PLACEHOLDERS,
    FOOTER_Y,
    MARGIN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    PLACEHOLDERS_ENABLED,
    RULE_COLOR,
    FontPair,
    LayoutSpec,
    Placeholders,
    get_layout,
    layout_for_template,
)
from resumely.contexts.rendering.exceptions import RenderError
from resumely.contexts.rendering.layout import Pen, Region, split_region
from resumely.contexts.rendering.logger import (
    _log_debug,
    log_render_failure,
    log_render_result,
    log_render_start,
)
from resumely.contexts.rendering.render_model import RenderModel, build_render_model
from resumely.contexts.rendering.sections import (
    render_awards,
    render_certifications,
    render_contact,
    render_education,
    render_experience,
    render_footer,
    render_header,
    render_hobbies,
    render_languages,
    render_projects,
    render_skill_columns,
    render_skills,
    render_summary,
    render_volunteer,
)
from resumely.contexts.rendering.serializer import new_document, serialize

# (renderer, RenderModel attribute) in drawing order
SINGLE_COLUMN_SECTIONS = (
    (render_summary, "summary"),
    (render_skills, "skills"),
    (render_experience, "experience"),
    (render_education, "education"),
    (render_languages, "languages"),
    (render_certifications, "certifications"),
    (render_projects, "projects"),
    (render_awards, "awards"),
    (render_volunteer, "volunteer"),
    (render_hobbies, "hobbies"),
)

# Skills lead the sidebar; their sub-column count comes from the layout
LEFT_COLUMN_SECTIONS = (
    (render_education, "education"),
    (render_languages, "languages"),
    (render_certifications, "certifications"),
    (render_awards, "awards"),
    (render_volunteer, "volunteer"),
    (render_hobbies, "hobbies"),
)

RIGHT_COLUMN_SECTIONS = (
    (partial(render_experience, title="Work History"), "experience"),
    (render_projects, "projects"),
)

_PLACEHOLDERS_FROM_ENV = DEFAULT_PLACEHOLDERS if PLACEHOLDERS_ENABLED else None


def embed_fonts(fonts: FontPair) -> None:
    """
    Make the regular and bold fonts available for measuring and drawing.

    TrueType files are registered under their given names; standard PDF
    fonts are looked up to make sure the name is known.

    Raises:
        KeyError: If a font name is neither registered nor a standard font
        TTFError / OSError: If a TrueType file cannot be read
    """
    for name, path in ((fonts.regular, fonts.regular_path), (fonts.bold, fonts.bold_path)):
        if path:
            pdfmetrics.registerFont(TTFont(name, path))
        else:
            pdfmetrics.getFont(name)


def _run_sections(pen: Pen, region: Region, y: float, model: RenderModel, sections) -> float:
    for renderer, attribute in sections:
        y = renderer(pen, region, y, getattr(model, attribute))
    return y


def _render_masthead(pen: Pen, region: Region, model: RenderModel) -> float:
    """Name and contact line, followed by the divider rule."""
    y = PAGE_HEIGHT - MARGIN
    y = render_header(pen, region, y, model.name)
    y = render_contact(pen, region, y, model.contact)
    pen.rule(region.x, y + 10, region.x + region.width, y + 10, RULE_COLOR)
    return y


def assemble_single_column(pen: Pen, model: RenderModel, layout: LayoutSpec) -> float:
    """
    Draw every section in one full-width column.

    Returns:
        Final vertical cursor (negative when content overflowed the page)
    """
    region = Region(MARGIN, PAGE_WIDTH - 2 * MARGIN)
    y = _render_masthead(pen, region, model)
    y = _run_sections(pen, region, y, model, SINGLE_COLUMN_SECTIONS)
    render_footer(pen, region, FOOTER_Y, model.generated_on)
    return y


def assemble_two_column(pen: Pen, model: RenderModel, layout: LayoutSpec) -> float:
    """
    Draw a full-width masthead and summary, then a sidebar and a main column.

    The two columns start at the same height and keep independent cursors.

    Returns:
        The lower of the two column cursors
    """
    region = Region(MARGIN, PAGE_WIDTH - 2 * MARGIN)
    y = _render_masthead(pen, region, model)
    y = render_summary(pen, region, y, model.summary)

    left, right = split_region(region, layout.left_column_ratio, layout.gutter)
    skills_renderer = partial(render_skill_columns, columns=layout.skill_columns)
    left_sections = ((skills_renderer, "skills"),) + LEFT_COLUMN_SECTIONS

    left_y = _run_sections(pen, left, y, model, left_sections)
    right_y = _run_sections(pen, right, y, model, RIGHT_COLUMN_SECTIONS)

    # Decorative page border and column divider
    divider_x = left.x + left.width + layout.gutter / 2
    pen.rule(divider_x, y + 10, divider_x, FOOTER_Y + 15, RULE_COLOR)
    pen.canvas.setStrokeColor(RULE_COLOR)
    pen.canvas.rect(MARGIN / 2, MARGIN / 2, PAGE_WIDTH - MARGIN, PAGE_HEIGHT - MARGIN,
                    stroke=1, fill=0)

    render_footer(pen, region, FOOTER_Y, model.generated_on)
    return min(left_y, right_y)


def _assembler_for(layout: LayoutSpec):
    return assemble_two_column if layout.is_two_column else assemble_single_column


def generate_pdf(
    record: Union[ResumeRecord, Mapping[str, Any]],
    layout: Optional[str] = None,
    placeholders: Optional[Placeholders] = _PLACEHOLDERS_FROM_ENV,
    fonts: FontPair = DEFAULT_FONTS,
    generated_on: Optional[date] = None,
) -> bytes:
    """
    Render a resume record as a one-page PDF.

    Args:
        record: ResumeRecord, or a stored resume document as a mapping
        layout: Layout name ("single_column" or "two_column"). Default: the
                layout of the record's template
        placeholders: Stand-in content for absent fields (None = none)
        fonts: Regular and bold fonts
        generated_on: Date printed in the footer (default: today)

    Returns:
        Complete PDF document bytes

    Raises:
        RenderError: If anything fails; no partial output is returned
    """
    resume_name = None
    layout_name = layout
    start_time = time.time()

    try:
        if not isinstance(record, ResumeRecord):
            record = ResumeRecord.from_dict(record)
        resume_name = record.display_name

        spec = get_layout(layout) if layout else layout_for_template(record.template_id)
        layout_name = spec.name
        log_render_start(resume_name, layout_name, record.to_summary())

        model = build_render_model(record, placeholders=placeholders, generated_on=generated_on)

        embed_fonts(fonts)
        _log_debug(f"Fonts ready: {fonts.regular}, {fonts.bold}")

        canvas, buffer = new_document(resume_name)
        pen = Pen(canvas=canvas, fonts=fonts, line_gap=spec.line_gap)
        final_y = _assembler_for(spec)(pen, model, spec)

        pdf_bytes = serialize(canvas, buffer)
    except Exception as e:
        if resume_name is None and isinstance(record, Mapping):
            resume_name = record.get("name") or None
        log_render_failure(resume_name or "<unnamed>", e)
        raise RenderError(
            "Failed to generate PDF",
            resume_name=resume_name,
            layout=layout_name,
            original_error=e,
        ) from e

    log_render_result(resume_name, len(pdf_bytes), final_y, time.time() - start_time)
    return pdf_bytes
