"""
Pagination state for one resume render

Each column (a sidebar, a content area, or the single body column) is an
independent vertical flow with its own cursor and current page index. The
columns share one append-only page sequence: whichever column needs a page
first allocates it, and the active variant redraws its persistent chrome on
it before any content lands there. The current page is always looked up
through the context, never cached by callers.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

import structlog

from .surface import Document, FontHandle, Page
from .text_wrapper import TextMeasurer

logger = structlog.get_logger()


@dataclass(frozen=True)
class PaginationThresholds:
    """
    Space a variant requires before starting each kind of block

    All values are points above bottom_margin; nothing is drawn below it.
    """
    bottom_margin: float = 50.0
    min_space_for_section: float = 60.0
    min_space_for_entry_header: float = 40.0
    min_space_for_line: float = 10.0


@dataclass
class Column:
    """A vertical flow region: left edge, width and a moving cursor"""
    name: str
    x: float
    width: float
    cursor: float
    continuation_top: float
    page_index: int = 0
    page_top: float = 0.0

    def __post_init__(self):
        self.page_top = self.cursor

    @property
    def right(self) -> float:
        return self.x + self.width


class RenderContext:
    """
    Mutable render state: pages, columns and cursors

    Args:
        document: Document receiving pages
        thresholds: Variant pagination thresholds
        draw_chrome: Callback drawing persistent decorations on a new page
        regular_font: Embedded regular face
        bold_font: Embedded bold face
        measurer: Width estimator shared by every wrap in the render
    """

    def __init__(
        self,
        document: Document,
        thresholds: PaginationThresholds,
        draw_chrome: Callable[[Page], None],
        regular_font: FontHandle,
        bold_font: FontHandle,
        measurer: TextMeasurer,
    ):
        self.document = document
        self.thresholds = thresholds
        self.draw_chrome = draw_chrome
        self.regular_font = regular_font
        self.bold_font = bold_font
        self.measurer = measurer
        self.columns: Dict[str, Column] = {}
        self.new_page()

    @property
    def width(self) -> float:
        return self.document.width

    @property
    def height(self) -> float:
        return self.document.height

    @property
    def pages(self):
        return self.document.pages

    def add_column(
        self,
        name: str,
        x: float,
        width: float,
        top: float,
        continuation_top: Optional[float] = None,
    ) -> Column:
        column = Column(
            name=name,
            x=x,
            width=width,
            cursor=top,
            continuation_top=top if continuation_top is None else continuation_top,
        )
        self.columns[name] = column
        return column

    def new_page(self) -> Page:
        """Append a page and redraw the variant's persistent chrome on it"""
        page = self.document.add_page()
        self.draw_chrome(page)
        if page.number > 1:
            logger.debug("Allocated continuation page", page=page.number)
        return page

    def page(self, column: Column) -> Page:
        """The page the column is currently drawing on"""
        while len(self.document.pages) <= column.page_index:
            self.new_page()
        return self.document.pages[column.page_index]

    def next_page(self, column: Column) -> Page:
        """Move a column to the following page and reset its cursor"""
        column.page_index += 1
        column.cursor = column.continuation_top
        column.page_top = column.continuation_top
        return self.page(column)

    def ensure_space(self, column: Column, need: float) -> Page:
        """
        Make sure `need` points fit above the bottom margin

        Paginates before drawing when they don't. A column still at the top of
        its current page stays put, so an oversized block can never
        produce a run of empty pages.
        """
        if column.cursor - need < self.thresholds.bottom_margin and column.cursor < column.page_top:
            return self.next_page(column)
        return self.page(column)

    def fits_on_fresh_page(self, column: Column, need: float) -> bool:
        """Whether a block of `need` points fits on a continuation page at all"""
        return need <= column.continuation_top - self.thresholds.bottom_margin

    def advance(self, column: Column, amount: float):
        column.cursor = max(column.cursor - amount, 0.0)
