"""
Text measurement and wrapping for the resume layout engine

Widths are estimated with an average-character-width heuristic by default
(len(text) * font_size * 0.6). This is an approximation, not glyph
measurement: "W"-heavy lines come out wider than estimated and "i"-heavy lines
narrower. FontMetricsMeasurer swaps in ReportLab's real font metrics without
changing any caller.
"""

import re
from typing import Iterable, List, Optional, Protocol

from reportlab.pdfbase.pdfmetrics import stringWidth

DEFAULT_CHAR_WIDTH_FACTOR = 0.6
BULLET = "•"

_SENTENCE_BREAK = re.compile(r"[.!?]+")


class TextMeasurer(Protocol):
    """Anything that can estimate the rendered width of a string"""

    def width(self, text: str, font_size: float, bold: bool = False) -> float:
        ...


class AverageWidthMeasurer:
    """Character-count heuristic: every glyph is font_size * factor wide"""

    def __init__(self, factor: float = DEFAULT_CHAR_WIDTH_FACTOR):
        self.factor = factor

    def width(self, text: str, font_size: float, bold: bool = False) -> float:
        return len(text) * font_size * self.factor

    def __repr__(self) -> str:
        return f"AverageWidthMeasurer(factor={self.factor})"


class FontMetricsMeasurer:
    """Measure with the AFM/TTF metrics ReportLab has for the given fonts"""

    def __init__(self, regular_font: str = "Helvetica", bold_font: str = "Helvetica-Bold"):
        self.regular_font = regular_font
        self.bold_font = bold_font

    def width(self, text: str, font_size: float, bold: bool = False) -> float:
        font_name = self.bold_font if bold else self.regular_font
        return stringWidth(text, font_name, font_size)

    def __repr__(self) -> str:
        return f"FontMetricsMeasurer({self.regular_font!r}, {self.bold_font!r})"


_default_measurer = AverageWidthMeasurer()


def estimated_width(text: str, font_size: float, measurer: Optional[TextMeasurer] = None) -> float:
    return (measurer or _default_measurer).width(text, font_size)


def wrap_text(
    text: str,
    max_width: float,
    font_size: float,
    measurer: Optional[TextMeasurer] = None,
    bold: bool = False,
) -> List[str]:
    """
    Greedy word wrap

    Args:
        text: Text to wrap; split on whitespace
        max_width: Available line width in points
        font_size: Font size in points
        measurer: Width estimator, defaults to the 0.6 average-width heuristic
        bold: Measure with the bold face (only matters for real metrics)

    Returns:
        Lines in order. A word wider than max_width on its own is emitted
        as a line by itself, never split.
    """
    measurer = measurer or _default_measurer
    lines: List[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measurer.width(candidate, font_size, bold) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)

    return lines


def split_sentences(text: str) -> List[str]:
    """Split a description into bullet sentences on runs of . ! ?"""
    return [part.strip() for part in _SENTENCE_BREAK.split(text or "") if part.strip()]


def pack_items(
    items: Iterable[str],
    max_width: float,
    font_size: float,
    separator: str = f" {BULLET} ",
    measurer: Optional[TextMeasurer] = None,
) -> List[str]:
    """
    Pack whole items into separator-joined rows that fit max_width

    Items are never split; an item wider than a row gets a row to itself.
    """
    measurer = measurer or _default_measurer
    rows: List[str] = []
    current = ""

    for item in items:
        item = item.strip()
        if not item:
            continue
        candidate = f"{current}{separator}{item}" if current else item
        if current and measurer.width(candidate, font_size) > max_width:
            rows.append(current)
            current = item
        else:
            current = candidate

    if current:
        rows.append(current)

    return rows


def hard_wrap(
    text: str,
    max_width: float,
    font_size: float,
    measurer: Optional[TextMeasurer] = None,
    bold: bool = False,
) -> List[str]:
    """
    Word wrap, then break any line still wider than max_width between characters

    For narrow columns holding URLs, e-mail addresses and similar unbroken
    tokens. A single character wider than max_width still gets its own line.
    """
    measurer = measurer or _default_measurer
    lines: List[str] = []

    for line in wrap_text(text, max_width, font_size, measurer, bold):
        while len(line) > 1 and measurer.width(line, font_size, bold) > max_width:
            cut = len(line) - 1
            while cut > 1 and measurer.width(line[:cut], font_size, bold) > max_width:
                cut -= 1
            lines.append(line[:cut])
            line = line[cut:]
        lines.append(line)

    return lines
