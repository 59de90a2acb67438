"""Shared pytest fixtures."""

import pytest

from resumely.contexts.rendering.defaults import FontPair
from resumely.contexts.rendering.layout import Pen


class RecordingCanvas:
    """Stand-in for a reportlab canvas that records draw calls."""

    def __init__(self):
        self.strings = []
        self.lines = []
        self.font = None

    def setFont(self, name, size):
        self.font = (name, size)

    def setFillColor(self, color):
        pass

    def setStrokeColor(self, color):
        pass

    def setLineWidth(self, width):
        pass

    def drawString(self, x, y, text):
        self.strings.append((x, y, text))

    def line(self, x1, y1, x2, y2):
        self.lines.append((x1, y1, x2, y2))

    def texts(self):
        return [text for _, _, text in self.strings]


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()


@pytest.fixture
def pen(recording_canvas):
    return Pen(canvas=recording_canvas, fonts=FontPair(), line_gap=2)
