"""
Section renderers.

Each renderer draws one resume section into a region of the page and returns
the updated vertical cursor. Renderers receive only their slice of the
RenderModel. A section whose content is empty draws nothing (not even its
header) and returns the cursor unchanged.
"""

from typing import Optional, Sequence

from resumely.contexts.rendering.defaults import (
    BODY_SIZE,
    BULLET,
    BULLET_INDENT,
    CONTACT_COLOR,
    DATE_COLOR,
    DETAIL_SIZE,
    FOOTER_COLOR,
    FOOTER_SIZE,
    NAME_COLOR,
    NAME_SIZE,
    SECTION_HEADER_COLOR,
    SECTION_HEADER_SIZE,
    SUBHEADING_COLOR,
    SUBHEADING_SIZE,
)
from resumely.contexts.rendering.layout import Pen, Region, equal_columns, split_items
from resumely.contexts.rendering.render_model import (
    CertificationView,
    EducationView,
    ExperienceView,
    ProjectView,
)
from resumely.utils.timestamp import format_numeric_date

# Vertical spacing after each kind of block (points)
SECTION_HEADER_SPACING = 25
SECTION_SPACING = 20
ENTRY_SPACING = 10
BULLET_SPACING = 5
SUBHEADING_SPACING = 4


def render_section_header(pen: Pen, region: Region, y: float, title: str) -> float:
    """Draw a section title and return the cursor below it."""
    pen.text(title, region.x, y, SECTION_HEADER_SIZE, bold=True, color=SECTION_HEADER_COLOR)
    return y - SECTION_HEADER_SPACING


def render_bullets(pen: Pen, region: Region, y: float, items: Sequence[str],
                   size: float = DETAIL_SIZE) -> float:
    """Draw each item as its own bullet-prefixed, independently wrapped line."""
    bullet_region = region.indent(BULLET_INDENT)
    for item in items:
        y = pen.wrapped(f"{BULLET} {item}", bullet_region, y, size)
        y -= BULLET_SPACING
    return y


def _subheading(pen: Pen, region: Region, y: float, text: Optional[str],
                size: float = SUBHEADING_SIZE) -> float:
    if not text:
        return y
    return pen.wrapped(text, region, y, size, bold=True, color=SUBHEADING_COLOR) - SUBHEADING_SPACING


def _detail(pen: Pen, region: Region, y: float, text: Optional[str], color=DATE_COLOR) -> float:
    if not text:
        return y
    return pen.wrapped(text, region, y, DETAIL_SIZE, color=color) - 3


def _paragraph(pen: Pen, region: Region, y: float, text: Optional[str]) -> float:
    if not text:
        return y
    return pen.wrapped(text, region, y, DETAIL_SIZE) - ENTRY_SPACING


def render_header(pen: Pen, region: Region, y: float, name: str) -> float:
    pen.text(name, region.x, y, NAME_SIZE, bold=True, color=NAME_COLOR)
    return y - 30


def render_contact(pen: Pen, region: Region, y: float, contact: Sequence[str]) -> float:
    if not contact:
        return y
    y = pen.wrapped(" | ".join(contact), region, y, DETAIL_SIZE, color=CONTACT_COLOR)
    return y - SECTION_SPACING


def render_summary(pen: Pen, region: Region, y: float, summary: str,
                   title: str = "Professional Summary") -> float:
    if not summary:
        return y
    y = render_section_header(pen, region, y, title)
    y = pen.wrapped(summary, region, y, BODY_SIZE)
    return y - SECTION_SPACING


def render_skills(pen: Pen, region: Region, y: float, skills: Sequence[str],
                  title: str = "Skills") -> float:
    """Skills as one comma-separated, wrapped paragraph."""
    if not skills:
        return y
    y = render_section_header(pen, region, y, title)
    y = pen.wrapped(", ".join(skills), region, y, BODY_SIZE)
    return y - SECTION_SPACING


def render_skill_columns(pen: Pen, region: Region, y: float, skills: Sequence[str],
                         columns: int = 2, title: str = "Skills") -> float:
    """
    Skills as bullets laid out in parallel sub-columns.

    The list is split by index (the first sub-column takes ceil(n / columns)
    items). Every sub-column starts at the same height and keeps its own
    cursor, so a long item in one sub-column never overlaps the next one.
    The section ends below the longest sub-column.
    """
    if not skills:
        return y
    y = render_section_header(pen, region, y, title)

    bottoms = []
    for sub_region, chunk in zip(equal_columns(region, columns, gutter=8), split_items(skills, columns)):
        column_y = y
        for skill in chunk:
            column_y = pen.wrapped(f"{BULLET} {skill}", sub_region, column_y, DETAIL_SIZE)
        bottoms.append(column_y)

    return min(bottoms) - SECTION_SPACING


def render_experience(pen: Pen, region: Region, y: float, experience: Sequence[ExperienceView],
                      title: str = "Professional Experience") -> float:
    if not experience:
        return y
    y = render_section_header(pen, region, y, title)

    for entry in experience:
        y = _subheading(pen, region, y, entry.heading)
        dates = " | ".join(part for part in (entry.dates, *entry.details) if part)
        y = _detail(pen, region, y, dates)
        y -= 2
        y = _paragraph(pen, region, y, entry.description)
        y = render_bullets(pen, region, y, entry.achievements)
        if entry.projects:
            y = render_bullets(pen, region, y, [f"Project: {project}" for project in entry.projects])
        if entry.skills_used:
            y = _detail(pen, region, y, f"Skills used: {', '.join(entry.skills_used)}")
        y -= ENTRY_SPACING

    return y


def render_education(pen: Pen, region: Region, y: float, education: Sequence[EducationView],
                     title: str = "Education") -> float:
    if not education:
        return y
    y = render_section_header(pen, region, y, title)

    for entry in education:
        y = _subheading(pen, region, y, entry.heading)
        if entry.institution:
            y = pen.wrapped(entry.institution, region, y, BODY_SIZE, color=CONTACT_COLOR) - 2
        y = _detail(pen, region, y, entry.dates)
        y = _detail(pen, region, y, f"Major: {entry.major}" if entry.major else None)
        y = _detail(pen, region, y, f"GPA: {entry.gpa}" if entry.gpa else None)
        y = _detail(pen, region, y, f"Honors: {entry.honors}" if entry.honors else None)
        y = _paragraph(pen, region, y, entry.description)
        y -= ENTRY_SPACING

    return y


def render_languages(pen: Pen, region: Region, y: float, languages: Sequence[str],
                     title: str = "Languages") -> float:
    if not languages:
        return y
    y = render_section_header(pen, region, y, title)
    y = pen.wrapped(", ".join(languages), region, y, BODY_SIZE)
    return y - SECTION_SPACING


def render_certifications(pen: Pen, region: Region, y: float,
                          certifications: Sequence[CertificationView],
                          title: str = "Certifications") -> float:
    if not certifications:
        return y
    y = render_section_header(pen, region, y, title)

    for entry in certifications:
        y = _subheading(pen, region, y, entry.heading, size=BODY_SIZE)
        y = _detail(pen, region, y, entry.dates)
        y = _paragraph(pen, region, y, entry.description)
        y -= BULLET_SPACING

    return y - BULLET_SPACING


def render_projects(pen: Pen, region: Region, y: float, projects: Sequence[ProjectView],
                    title: str = "Projects") -> float:
    if not projects:
        return y
    y = render_section_header(pen, region, y, title)

    for entry in projects:
        y = _subheading(pen, region, y, entry.name)
        y = _detail(pen, region, y, entry.dates)
        y = _paragraph(pen, region, y, entry.description)
        if entry.technologies:
            y = _paragraph(pen, region, y, f"Technologies: {', '.join(entry.technologies)}")
        y = _detail(pen, region, y, entry.link, color=CONTACT_COLOR)
        y -= BULLET_SPACING

    return y - BULLET_SPACING


def render_bullet_section(pen: Pen, region: Region, y: float, items: Sequence[str],
                          title: str) -> float:
    """Generic titled bullet list (awards, volunteer work, hobbies)."""
    if not items:
        return y
    y = render_section_header(pen, region, y, title)
    y = render_bullets(pen, region, y, items)
    return y - ENTRY_SPACING


def render_awards(pen: Pen, region: Region, y: float, awards: Sequence[str]) -> float:
    return render_bullet_section(pen, region, y, awards, "Awards")


def render_volunteer(pen: Pen, region: Region, y: float, volunteer: Sequence[str]) -> float:
    return render_bullet_section(pen, region, y, volunteer, "Volunteer")


def render_hobbies(pen: Pen, region: Region, y: float, hobbies: Sequence[str]) -> float:
    return render_bullet_section(pen, region, y, hobbies, "Hobbies")


def render_footer(pen: Pen, region: Region, y: float, generated_on) -> float:
    """Draw the generation date at the fixed footer baseline; the cursor is unaffected."""
    pen.text(f"Generated on {format_numeric_date(generated_on)}", region.x, y, FOOTER_SIZE,
             color=FOOTER_COLOR)
    return y
