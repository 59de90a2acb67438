"""
Layout primitives.

Word-wrapping text placement and column-width arithmetic on a reportlab canvas.

Coordinates follow PDF conventions: x grows to the right, y grows upwards,
and the vertical cursor moves down the page by decreasing y. Nothing here
knows about page breaks; a cursor may run below zero on overlong content.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from reportlab.lib.colors import Color
from reportlab.pdfbase.pdfmetrics import stringWidth

from resumely.contexts.rendering.defaults import TEXT_COLOR, FontPair


def wrap_text(text: str, max_width: float, font_name: str, font_size: float) -> List[str]:
    """
    Greedily break text into lines no wider than max_width.

    Words are split on whitespace and accumulated while the measured width of
    "line + next word" stays within max_width. A word wider than max_width on
    its own is kept whole on a line of its own (no hyphenation).

    Args:
        text: Text to wrap (empty or whitespace-only yields no lines)
        max_width: Maximum line width in points
        font_name: Registered font name used for measurement
        font_size: Font size in points

    Returns:
        Wrapped lines, top to bottom
    """
    lines: List[str] = []
    line = ""

    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if line and stringWidth(candidate, font_name, font_size) > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate

    if line:
        lines.append(line)

    return lines


def draw_text(
    canvas,
    text: str,
    x: float,
    y: float,
    font_size: float,
    font_name: str,
    color: Color = TEXT_COLOR,
) -> None:
    """Draw a single unwrapped line of text with its baseline at y."""
    canvas.setFont(font_name, font_size)
    canvas.setFillColor(color)
    canvas.drawString(x, y, text)


def wrap_and_draw(
    canvas,
    text: str,
    x: float,
    y: float,
    max_width: float,
    font_size: float,
    font_name: str,
    color: Color = TEXT_COLOR,
    line_gap: float = 2,
) -> float:
    """
    Draw word-wrapped text starting at (x, y) and return the next cursor.

    Each line advances the cursor by font_size + line_gap. Empty text draws
    nothing and returns y unchanged.

    Returns:
        Vertical cursor just below the last drawn line
    """
    lines = wrap_text(text or "", max_width, font_name, font_size)
    if not lines:
        return y

    canvas.setFont(font_name, font_size)
    canvas.setFillColor(color)
    for line in lines:
        canvas.drawString(x, y, line)
        y -= font_size + line_gap

    return y


@dataclass(frozen=True)
class Region:
    """A horizontal band of the page: left edge and available width."""

    x: float
    width: float

    def indent(self, amount: float) -> "Region":
        return Region(self.x + amount, self.width - amount)


def split_width(total: float, ratio: float, gutter: float = 0) -> Tuple[float, float]:
    """
    Split a width into two columns separated by a gutter.

    Args:
        total: Width to split
        ratio: Share of (total - gutter) given to the first column
        gutter: Gap between the columns

    Returns:
        (first_width, second_width)
    """
    usable = total - gutter
    first = usable * ratio
    return first, usable - first


def split_region(region: Region, ratio: float, gutter: float = 0) -> Tuple[Region, Region]:
    """Split a region into a left and right region with a gutter between them."""
    left_width, right_width = split_width(region.width, ratio, gutter)
    return (
        Region(region.x, left_width),
        Region(region.x + left_width + gutter, right_width),
    )


def equal_columns(region: Region, count: int, gutter: float = 0) -> List[Region]:
    """Divide a region into count equal-width sub-columns."""
    width = (region.width - gutter * (count - 1)) / count
    return [Region(region.x + i * (width + gutter), width) for i in range(count)]


def split_items(items: Sequence[str], count: int = 2) -> List[List[str]]:
    """
    Split items by index into count consecutive chunks.

    Earlier chunks take the remainder, so with two chunks the first holds
    ceil(n / 2) items.
    """
    chunk_size = max(1, math.ceil(len(items) / count))
    return [list(items[i * chunk_size:(i + 1) * chunk_size]) for i in range(count)]


@dataclass
class Pen:
    """
    Drawing state shared by the section renderers of one render call.

    Bundles the canvas, the font pair, and the layout's line gap so that
    renderers only pass positions and content.
    """

    canvas: object
    fonts: FontPair
    line_gap: float = 2

    def text(self, text: str, x: float, y: float, size: float, bold: bool = False,
             color: Color = TEXT_COLOR) -> None:
        draw_text(self.canvas, text, x, y, size, self.font(bold), color)

    def wrapped(self, text: str, region: Region, y: float, size: float, bold: bool = False,
                color: Color = TEXT_COLOR) -> float:
        return wrap_and_draw(
            self.canvas, text, region.x, y, region.width, size, self.font(bold), color,
            line_gap=self.line_gap,
        )

    def font(self, bold: bool = False) -> str:
        return self.fonts.bold if bold else self.fonts.regular

    def rule(self, x1: float, y1: float, x2: float, y2: float, color: Color,
             width: float = 0.75) -> None:
        self.canvas.setStrokeColor(color)
        self.canvas.setLineWidth(width)
        self.canvas.line(x1, y1, x2, y2)
