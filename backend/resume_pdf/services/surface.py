"""
Page drawing surface for the resume layout engine

Pages record drawing operations instead of painting a canvas directly, so a
finished layout can be inspected (tests, page counts) before the PDF writer
replays it onto a ReportLab canvas. Coordinates are PDF points with the origin
at the bottom-left corner of the page.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import structlog
from reportlab.lib.colors import Color
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from resume_pdf.core.exceptions import FontEmbeddingError

logger = structlog.get_logger()

PAGE_WIDTH, PAGE_HEIGHT = A4  # 595.28 x 841.89 points

# Operation tag for persistent decorations redrawn on every page
CHROME = "chrome"


@dataclass(frozen=True)
class FontHandle:
    """A font face usable by the drawing surface"""
    name: str
    bold: bool = False


@dataclass(frozen=True)
class DrawOp:
    """One recorded drawing operation"""
    kind: str
    x: float
    y: float
    text: str = ""
    font: Optional[FontHandle] = None
    size: float = 0.0
    width: float = 0.0
    height: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    radius: float = 0.0
    thickness: float = 0.0
    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    tag: str = ""


class Page:
    """A fixed-size drawing surface holding its operations in draw order"""

    def __init__(self, number: int, width: float = PAGE_WIDTH, height: float = PAGE_HEIGHT):
        self.number = number
        self.width = width
        self.height = height
        self.ops: List[DrawOp] = []

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        font: FontHandle,
        color: Color,
        tag: str = "",
    ):
        self.ops.append(DrawOp("text", x, y, text=text, font=font, size=size, fill=color, tag=tag))

    def draw_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Optional[Color] = None,
        border_color: Optional[Color] = None,
        border_width: float = 0.0,
        radius: float = 0.0,
        tag: str = "",
    ):
        self.ops.append(DrawOp(
            "rect", x, y, width=width, height=height, radius=radius,
            thickness=border_width, fill=color, stroke=border_color, tag=tag,
        ))

    def draw_line(
        self,
        start: Tuple[float, float],
        end: Tuple[float, float],
        thickness: float,
        color: Color,
        tag: str = "",
    ):
        self.ops.append(DrawOp(
            "line", start[0], start[1], x2=end[0], y2=end[1],
            thickness=thickness, stroke=color, tag=tag,
        ))

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        color: Optional[Color] = None,
        border_color: Optional[Color] = None,
        border_width: float = 0.0,
        tag: str = "",
    ):
        self.ops.append(DrawOp(
            "circle", x, y, radius=radius, thickness=border_width,
            fill=color, stroke=border_color, tag=tag,
        ))

    def texts(self) -> List[DrawOp]:
        return [op for op in self.ops if op.kind == "text"]

    def text_content(self) -> List[str]:
        return [op.text for op in self.texts()]

    def chrome(self) -> List[DrawOp]:
        return [op for op in self.ops if op.tag == CHROME]

    def __repr__(self) -> str:
        return f"Page(number={self.number}, ops={len(self.ops)})"


@dataclass
class Document:
    """Append-only sequence of pages plus the fonts embedded for the render"""
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    title: str = ""
    pages: List[Page] = field(default_factory=list)
    fonts: List[FontHandle] = field(default_factory=list)

    def add_page(self) -> Page:
        page = Page(len(self.pages) + 1, self.width, self.height)
        self.pages.append(page)
        return page

    def embed_font(self, name: str, bold: bool = False, path: Optional[str] = None) -> FontHandle:
        handle = embed_font(name, bold=bold, path=path)
        self.fonts.append(handle)
        return handle

    @property
    def page_count(self) -> int:
        return len(self.pages)


def embed_font(name: str, bold: bool = False, path: Optional[str] = None) -> FontHandle:
    """
    Resolve a font face with ReportLab

    Standard Type 1 faces (Helvetica, Helvetica-Bold, ...) need no path. A
    TTF path registers the file under the given name first. Any failure is
    fatal for the render.
    """
    try:
        if path:
            if name not in pdfmetrics.getRegisteredFontNames():
                if not Path(path).exists():
                    raise FileNotFoundError(path)
                pdfmetrics.registerFont(TTFont(name, path))
                logger.info("Registered TrueType font", font=name, path=path)
        pdfmetrics.getFont(name)
    except Exception as e:
        logger.error("Font embedding failed", font=name, path=path, error=str(e))
        raise FontEmbeddingError(name, str(e)) from e

    return FontHandle(name=name, bold=bold)
