"""
Default values for resume rendering.

Provides shared defaults used by:
- render_model.py (placeholder content for absent fields)
- sections.py / assembler.py (page geometry, colors, typography, layouts)

Placeholder content is a presentation decision and is kept here, apart from
the resume record, so that an absent field and its on-page stand-in never mix.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv
from reportlab.lib.colors import Color

load_dotenv()

# A4 in points
PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
MARGIN = 50
FOOTER_Y = 30

# Colors
TEXT_COLOR = Color(0, 0, 0)
NAME_COLOR = Color(0.1, 0.1, 0.1)
SECTION_HEADER_COLOR = Color(0.2, 0.2, 0.6)
SUBHEADING_COLOR = Color(0.3, 0.3, 0.3)
CONTACT_COLOR = Color(0.4, 0.4, 0.4)
DATE_COLOR = Color(0.5, 0.5, 0.5)
FOOTER_COLOR = Color(0.6, 0.6, 0.6)
RULE_COLOR = Color(0.8, 0.8, 0.85)

# Font sizes
NAME_SIZE = 24
SECTION_HEADER_SIZE = 16
SUBHEADING_SIZE = 12
BODY_SIZE = 11
DETAIL_SIZE = 10
FOOTER_SIZE = 8

BULLET = "•"
BULLET_INDENT = 20

SINGLE_COLUMN = "single_column"
TWO_COLUMN = "two_column"

DEFAULT_LAYOUT = os.getenv("RESUMELY_LAYOUT", SINGLE_COLUMN)
PLACEHOLDERS_ENABLED = os.getenv("RESUMELY_PLACEHOLDERS", "true").lower() == "true"


@dataclass(frozen=True)
class LayoutSpec:
    """
    Geometry of one page layout.

    Attributes:
        name: Layout identifier
        line_gap: Extra vertical space between wrapped lines (points)
        left_column_ratio: Share of the content width given to the left column
                           (two-column layouts only)
        gutter: Horizontal gap between columns (points)
        skill_columns: Number of sub-columns the skills list is split into
    """

    name: str
    line_gap: float
    left_column_ratio: Optional[float] = None
    gutter: float = 0
    skill_columns: int = 1

    @property
    def is_two_column(self) -> bool:
        return self.left_column_ratio is not None


LAYOUTS: Dict[str, LayoutSpec] = {
    SINGLE_COLUMN: LayoutSpec(name=SINGLE_COLUMN, line_gap=2),
    TWO_COLUMN: LayoutSpec(
        name=TWO_COLUMN, line_gap=4, left_column_ratio=0.36, gutter=24, skill_columns=2
    ),
}

# Catalog template ids whose design uses the sidebar layout
TEMPLATE_LAYOUTS: Dict[str, str] = {
    "creative-portfolio": TWO_COLUMN,
    "tech-modern": TWO_COLUMN,
}


def get_layout(name: str) -> LayoutSpec:
    """
    Look up a layout by name.

    Raises:
        ValueError: If the layout name is unknown
    """
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown layout: {name}. Must be one of {', '.join(sorted(LAYOUTS))}"
        ) from None


def layout_for_template(template_id: Optional[str]) -> LayoutSpec:
    """Pick the layout a catalog template renders with."""
    return get_layout(TEMPLATE_LAYOUTS.get(template_id or "", DEFAULT_LAYOUT))


@dataclass(frozen=True)
class FontPair:
    """
    Regular and bold font used for a render.

    Standard PDF font names need no files. When a path is given the TrueType
    file is registered under the corresponding name before drawing.
    """

    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"
    regular_path: Optional[str] = None
    bold_path: Optional[str] = None


DEFAULT_FONTS = FontPair(
    regular=os.getenv("RESUMELY_FONT_REGULAR", "Helvetica"),
    bold=os.getenv("RESUMELY_FONT_BOLD", "Helvetica-Bold"),
    regular_path=os.getenv("RESUMELY_FONT_REGULAR_PATH") or None,
    bold_path=os.getenv("RESUMELY_FONT_BOLD_PATH") or None,
)


@dataclass(frozen=True)
class PlaceholderJob:
    position: str = "Job Title"
    company: str = "Company Name"
    description: str = "Describe your responsibilities and the impact you had in this role."


@dataclass(frozen=True)
class Placeholders:
    """Stand-in content drawn where a resume field is absent."""

    name: str = "Your Name"
    phone: str = "(555) 555-0100"
    summary: str = (
        "Motivated professional with a track record of delivering results. "
        "Add a short summary of your experience and goals here."
    )
    skills: Tuple[str, ...] = ("Communication", "Teamwork", "Problem Solving", "Time Management")
    job: PlaceholderJob = field(default_factory=PlaceholderJob)


DEFAULT_PLACEHOLDERS = Placeholders()
