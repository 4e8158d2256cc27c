"""
Design variant strategies for the resume layout engine

One SectionWalker runs the shared section loop (identity, summary,
experience, education, skills) for every design. A variant contributes a
VariantGeometry (column placement, palette, sizes, gaps, pagination
thresholds) plus its own chrome and identity block; the walker does the rest.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type

import structlog
from reportlab.lib.colors import Color

from resume_pdf.models.resume import DesignVariant, EducationEntry, ExperienceEntry, ResumeData
from .date_format import format_date_range
from .pagination import Column, PaginationThresholds, RenderContext
from .surface import CHROME, PAGE_WIDTH, Document, FontHandle, Page
from .text_wrapper import BULLET, TextMeasurer, hard_wrap, pack_items, split_sentences, wrap_text

logger = structlog.get_logger()

MAIN = "main"
SIDE = "side"

WHITE = Color(1, 1, 1)
BLACK = Color(0, 0, 0)


def gray(level: float) -> Color:
    return Color(level, level, level)


def leading(size: float) -> float:
    """Baseline-to-baseline distance for a font size"""
    return round(size * 1.2, 2)


@dataclass(frozen=True)
class ColumnStyle:
    """Colors, sizes and spacing for text inside one column"""
    title_color: Color
    headline_color: Color
    body_color: Color
    meta_color: Color
    rule_color: Color
    title_size: float = 10
    headline_size: float = 10
    meta_size: float = 9
    body_size: float = 9
    small_size: float = 7
    title_gap: float = 12
    rule_gap: float = 10
    rule_thickness: float = 0.5
    separator: str = "line"  # "line", "dots" or "none"
    title_marker: bool = False
    entry_indent: float = 0
    bullet_indent: float = 10
    entry_gap: float = 12
    section_gap: float = 12
    badge_fill: Optional[Color] = None
    badge_border: Optional[Color] = None


@dataclass(frozen=True)
class VariantGeometry:
    variant: DesignVariant
    thresholds: PaginationThresholds
    styles: Dict[str, ColumnStyle]
    placement: Dict[str, str]
    titles: Dict[str, str]
    rule_under_summary: bool = False
    skills_layout: str = "inline"  # "inline", "grid", "badges" or "list"
    skills_columns: int = 3


@dataclass
class Badge:
    lines: List[str]
    width: float
    height: float


class SectionWalker:
    """
    Shared layout algorithm for all resume designs

    Subclasses set `geometry` and implement setup_columns, draw_chrome and
    draw_identity. Entry formatting hooks (experience_meta, education_details)
    have sensible defaults and are overridden where a design differs.
    """

    geometry: VariantGeometry

    def __init__(
        self,
        data: ResumeData,
        regular_font: FontHandle,
        bold_font: FontHandle,
        measurer: TextMeasurer,
    ):
        self.data = data
        self.regular_font = regular_font
        self.bold_font = bold_font
        self.measurer = measurer
        self.experience = [entry for entry in data.experience if _has_experience_content(entry)]
        self.education = [entry for entry in data.education if _has_education_content(entry)]
        self.skills = data.visible_skills

    # Variant hooks

    def setup_columns(self, ctx: RenderContext):
        raise NotImplementedError

    def draw_chrome(self, page: Page):
        """Persistent decorations, drawn first on every page"""

    def draw_identity(self, ctx: RenderContext):
        raise NotImplementedError

    # Walk

    def render(self, document: Document) -> RenderContext:
        ctx = RenderContext(
            document,
            self.geometry.thresholds,
            self.draw_chrome,
            self.regular_font,
            self.bold_font,
            self.measurer,
        )
        self.setup_columns(ctx)
        self.draw_identity(ctx)
        self.draw_summary(ctx)
        self.draw_experience(ctx)
        self.draw_education(ctx)
        self.draw_skills(ctx)
        logger.debug("Layout finished", design=self.geometry.variant.value, pages=len(ctx.pages))
        return ctx

    def column_for(self, ctx: RenderContext, section: str) -> Column:
        return ctx.columns[self.geometry.placement.get(section, MAIN)]

    def style_for(self, column: Column) -> ColumnStyle:
        return self.geometry.styles[column.name]

    # Drawing primitives

    def text_width(self, text: str, size: float, bold: bool = False) -> float:
        return self.measurer.width(text, size, bold)

    def line(
        self,
        ctx: RenderContext,
        column: Column,
        text: str,
        size: float,
        color: Color,
        bold: bool = False,
        x: Optional[float] = None,
    ):
        """Draw one already-fitted line at the cursor, paginating first"""
        height = leading(size)
        page = ctx.ensure_space(column, max(height, ctx.thresholds.min_space_for_line))
        font = self.bold_font if bold else self.regular_font
        page.draw_text(text, column.x if x is None else x, column.cursor, size, font, color)
        ctx.advance(column, height)

    def paragraph(
        self,
        ctx: RenderContext,
        column: Column,
        text: str,
        size: float,
        color: Color,
        bold: bool = False,
        indent: float = 0.0,
        center: bool = False,
        break_words: bool = False,
    ) -> int:
        """Wrap text to the column and draw it line by line"""
        available = column.width - indent
        wrap = hard_wrap if break_words else wrap_text
        lines = wrap(text, available, size, self.measurer, bold)
        for text_line in lines:
            x = column.x + indent
            if center:
                x += max((available - self.text_width(text_line, size, bold)) / 2, 0.0)
            self.line(ctx, column, text_line, size, color, bold, x)
        return len(lines)

    def separator(self, page: Page, column: Column, style: ColumnStyle):
        y = column.cursor
        if style.separator == "dots":
            x = column.x
            while x < column.right:
                page.draw_circle(x, y, 0.3, color=style.rule_color)
                x += 3
        elif style.separator == "line":
            page.draw_line((column.x, y), (column.right, y), style.rule_thickness, style.rule_color)

    def section_title(self, ctx: RenderContext, column: Column, label: str, rule: bool = True):
        style = self.style_for(column)
        page = ctx.ensure_space(column, ctx.thresholds.min_space_for_section)
        x = column.x
        if style.title_marker:
            page.draw_circle(x + 3, column.cursor + style.title_size * 0.3, 1.5, color=style.title_color)
            x += 8
        page.draw_text(label, x, column.cursor, style.title_size, self.bold_font, style.title_color)
        ctx.advance(column, style.title_gap)
        if rule and style.separator != "none":
            self.separator(page, column, style)
            ctx.advance(column, style.rule_gap)

    # Sections

    def draw_summary(self, ctx: RenderContext):
        if not self.data.summary:
            return
        column = self.column_for(ctx, "summary")
        style = self.style_for(column)
        self.section_title(ctx, column, self.geometry.titles["summary"], rule=self.geometry.rule_under_summary)
        self.paragraph(ctx, column, self.data.summary, style.body_size, style.body_color)
        ctx.advance(column, style.section_gap)

    def draw_experience(self, ctx: RenderContext):
        if not self.experience:
            return
        column = self.column_for(ctx, "experience")
        style = self.style_for(column)
        self.section_title(ctx, column, self.geometry.titles["experience"])

        for entry in self.experience:
            ctx.ensure_space(column, ctx.thresholds.min_space_for_entry_header)
            if entry.position:
                self.paragraph(ctx, column, entry.position, style.headline_size, style.headline_color,
                               bold=True)
            self.experience_meta(ctx, column, style, entry)
            for sentence in split_sentences(entry.description):
                self.paragraph(ctx, column, f"{BULLET} {sentence}", style.body_size, style.body_color,
                               indent=style.bullet_indent)
            ctx.advance(column, style.entry_gap)

    def experience_meta(self, ctx: RenderContext, column: Column, style: ColumnStyle, entry: ExperienceEntry):
        """Company and date range on one line"""
        dates = format_date_range(entry.start_date, entry.end_date, entry.is_current)
        meta = " | ".join(part for part in (entry.company, dates) if part)
        if meta:
            self.paragraph(ctx, column, meta, style.meta_size, style.meta_color, indent=style.entry_indent)

    def draw_education(self, ctx: RenderContext):
        if not self.education:
            return
        column = self.column_for(ctx, "education")
        style = self.style_for(column)
        self.section_title(ctx, column, self.geometry.titles["education"])

        for entry in self.education:
            ctx.ensure_space(column, ctx.thresholds.min_space_for_entry_header)
            if entry.degree:
                self.paragraph(ctx, column, entry.degree, style.headline_size, style.headline_color, bold=True)
            for text, size in self.education_details(entry, style):
                self.paragraph(ctx, column, text, size, style.meta_color, indent=style.entry_indent)
            ctx.advance(column, style.entry_gap)

    def education_details(self, entry: EducationEntry, style: ColumnStyle) -> List[Tuple[str, float]]:
        details = f" {BULLET} ".join(part for part in (entry.institution, entry.year, entry.grade) if part)
        return [(details, style.meta_size)] if details else []

    def draw_skills(self, ctx: RenderContext):
        if not self.skills:
            return
        column = self.column_for(ctx, "skills")
        style = self.style_for(column)
        self.section_title(ctx, column, self.geometry.titles["skills"])

        layout = self.geometry.skills_layout
        if layout == "grid":
            self.skills_grid(ctx, column, style)
        elif layout == "badges":
            self.skills_badges(ctx, column, style)
        elif layout == "list":
            for skill in self.skills:
                self.paragraph(ctx, column, f"{BULLET} {skill}", style.body_size, style.body_color)
        else:
            for row in pack_items(self.skills, column.width, style.body_size, measurer=self.measurer):
                self.paragraph(ctx, column, row, style.body_size, style.body_color)
        ctx.advance(column, style.section_gap)

    def skills_grid(self, ctx: RenderContext, column: Column, style: ColumnStyle):
        """Fixed number of cells per row; long skills wrap inside their cell"""
        per_row = max(self.geometry.skills_columns, 1)
        cell_width = column.width / per_row
        size = style.body_size
        height = leading(size)

        for start in range(0, len(self.skills), per_row):
            cells = [
                wrap_text(f"{BULLET} {skill}", cell_width - 6, size, self.measurer)
                for skill in self.skills[start:start + per_row]
            ]
            row_lines = max(len(cell) for cell in cells)

            if ctx.fits_on_fresh_page(column, row_lines * height):
                page = ctx.ensure_space(column, row_lines * height)
                for index, cell in enumerate(cells):
                    x = column.x + index * cell_width
                    for offset, text_line in enumerate(cell):
                        page.draw_text(text_line, x, column.cursor - offset * height, size,
                                       self.regular_font, style.body_color)
                ctx.advance(column, row_lines * height)
                continue

            # Row taller than a page: lay it out one line at a time
            for offset in range(row_lines):
                page = ctx.ensure_space(column, max(height, ctx.thresholds.min_space_for_line))
                for index, cell in enumerate(cells):
                    if offset < len(cell):
                        page.draw_text(cell[offset], column.x + index * cell_width, column.cursor, size,
                                       self.regular_font, style.body_color)
                ctx.advance(column, height)

    def skills_badges(self, ctx: RenderContext, column: Column, style: ColumnStyle):
        """Chip per skill, packed left to right into rows that fit the column"""
        size = style.small_size
        height = leading(size)
        padding = 3.0
        gap = 4.0

        badges = []
        for skill in self.skills:
            lines = hard_wrap(skill, column.width - 2 * padding, size, self.measurer)
            width = max(self.text_width(text_line, size) for text_line in lines) + 2 * padding
            badges.append(Badge(lines, width, len(lines) * height))

        rows: List[List[Badge]] = []
        used = 0.0
        for badge in badges:
            if rows and used + gap + badge.width <= column.width:
                rows[-1].append(badge)
                used += gap + badge.width
            else:
                rows.append([badge])
                used = badge.width

        for row in rows:
            row_height = max(badge.height for badge in row)

            if ctx.fits_on_fresh_page(column, row_height + 3):
                page = ctx.ensure_space(column, row_height + 3)
                x = column.x
                for badge in row:
                    self.draw_badge(page, x, column.cursor, badge, style, padding)
                    x += badge.width + gap
                ctx.advance(column, row_height + gap)
                continue

            # A badge taller than a page continues as a new chip on the next page
            for badge in row:
                remaining = badge.lines
                while remaining:
                    page = ctx.ensure_space(column, height + 3)
                    room = int((column.cursor - ctx.thresholds.bottom_margin - 3) // height)
                    chunk = remaining[:max(room, 1)]
                    remaining = remaining[len(chunk):]
                    piece = Badge(chunk, badge.width, len(chunk) * height)
                    self.draw_badge(page, column.x, column.cursor, piece, style, padding)
                    ctx.advance(column, piece.height + gap)

    def draw_badge(self, page: Page, x: float, y: float, badge: Badge, style: ColumnStyle, padding: float):
        """Chip background plus its label lines; y is the first baseline"""
        size = style.small_size
        height = leading(size)
        page.draw_rectangle(
            x, y - badge.height + height - 3, badge.width, badge.height + 1,
            color=style.badge_fill, border_color=style.badge_border,
            border_width=0.5 if style.badge_border else 0.0, radius=2,
        )
        for offset, text_line in enumerate(badge.lines):
            page.draw_text(text_line, x + padding, y - offset * height, size,
                           self.regular_font, style.body_color)

    # Shared identity helpers

    def contact_lines(self, include_email: bool = False) -> List[str]:
        info = self.data.personal_info
        labelled = [
            ("Email", info.email if include_email else ""),
            ("Phone", info.phone),
            ("Location", info.location),
            ("LinkedIn", info.linked_in_url),
            ("Website", info.website_url),
        ]
        return [f"{label}: {value}" for label, value in labelled if value]

    def sidebar_contact(self, ctx: RenderContext, column: Column, include_email: bool = False):
        lines = self.contact_lines(include_email)
        if not lines:
            return
        style = self.style_for(column)
        self.section_title(ctx, column, "CONTACT")
        for text in lines:
            self.paragraph(ctx, column, text, style.body_size, style.body_color, break_words=True)
        ctx.advance(column, style.section_gap)


def _has_experience_content(entry: ExperienceEntry) -> bool:
    return bool(entry.position or entry.company or entry.start_date or entry.end_date
                or entry.is_current or entry.description.strip())


def _has_education_content(entry: EducationEntry) -> bool:
    return bool(entry.degree or entry.institution or entry.year or entry.grade)


class ClassicLayout(SectionWalker):
    """Single column, centered identity block with a rule underneath"""

    MARGIN = 60

    geometry = VariantGeometry(
        variant=DesignVariant.CLASSIC,
        thresholds=PaginationThresholds(
            bottom_margin=60,
            min_space_for_section=60,
            min_space_for_entry_header=40,
            min_space_for_line=10,
        ),
        styles={
            MAIN: ColumnStyle(
                title_color=BLACK,
                headline_color=BLACK,
                body_color=gray(0.2),
                meta_color=gray(0.2),
                rule_color=BLACK,
                title_size=11,
                headline_size=10,
                meta_size=9,
                body_size=9,
                title_gap=12,
                rule_gap=12,
                rule_thickness=0.75,
                entry_indent=12,
                bullet_indent=12,
                entry_gap=10,
                section_gap=14,
            ),
        },
        placement={"summary": MAIN, "experience": MAIN, "education": MAIN, "skills": MAIN},
        titles={
            "summary": "PROFESSIONAL SUMMARY",
            "experience": "PROFESSIONAL EXPERIENCE",
            "education": "EDUCATION",
            "skills": "SKILLS",
        },
        skills_layout="grid",
        skills_columns=3,
    )

    def setup_columns(self, ctx: RenderContext):
        ctx.add_column(MAIN, self.MARGIN, ctx.width - 2 * self.MARGIN, ctx.height - self.MARGIN)

    def draw_identity(self, ctx: RenderContext):
        column = ctx.columns[MAIN]
        info = self.data.personal_info

        if info.full_name:
            self.paragraph(ctx, column, info.full_name, 18, BLACK, bold=True, center=True)
            ctx.advance(column, 4)

        contact = info.contact_parts() + info.link_parts()
        for row in pack_items(contact, column.width, 10, separator=" | ", measurer=self.measurer):
            self.paragraph(ctx, column, row, 10, gray(0.2), center=True)

        ctx.advance(column, 8)
        page = ctx.ensure_space(column, 10)
        page.draw_line((column.x, column.cursor), (column.right, column.cursor), 1, BLACK)
        ctx.advance(column, 24)

    def education_details(self, entry: EducationEntry, style: ColumnStyle) -> List[Tuple[str, float]]:
        text = entry.institution
        if entry.year:
            text = f"{text}, {entry.year}" if text else entry.year
        if entry.grade:
            text = f"{text} - {entry.grade}" if text else entry.grade
        return [(text, style.meta_size)] if text else []


class ModernSidebarLayout(SectionWalker):
    """Single column under a full-width accent band holding name and contact"""

    MARGIN = 50
    MIN_BAND_HEIGHT = 80
    COMPACT_BAND_HEIGHT = 30
    BODY_GAP = 28
    ACCENT = Color(0.2, 0.4, 0.6)

    geometry = VariantGeometry(
        variant=DesignVariant.MODERN_SIDEBAR,
        thresholds=PaginationThresholds(
            bottom_margin=50,
            min_space_for_section=60,
            min_space_for_entry_header=40,
            min_space_for_line=10,
        ),
        styles={
            MAIN: ColumnStyle(
                title_color=ACCENT,
                headline_color=BLACK,
                body_color=gray(0.2),
                meta_color=gray(0.4),
                rule_color=ACCENT,
                title_size=11,
                headline_size=10,
                meta_size=9,
                body_size=9,
                title_gap=12,
                rule_gap=12,
                rule_thickness=0.8,
                bullet_indent=10,
                entry_gap=12,
                section_gap=14,
            ),
        },
        placement={"summary": MAIN, "experience": MAIN, "education": MAIN, "skills": MAIN},
        titles={
            "summary": "PROFESSIONAL SUMMARY",
            "experience": "PROFESSIONAL EXPERIENCE",
            "education": "EDUCATION",
            "skills": "SKILLS",
        },
        skills_layout="inline",
    )

    def __init__(self, data: ResumeData, regular_font: FontHandle, bold_font: FontHandle,
                 measurer: TextMeasurer):
        super().__init__(data, regular_font, bold_font, measurer)
        self.band_lines, self.band_height = self._band_layout(PAGE_WIDTH - 2 * self.MARGIN)

    def _band_layout(self, width: float) -> Tuple[List[Tuple[str, float, float, bool, Color]], float]:
        """Lines in the header band as (text, offset from page top, size, bold, color)"""
        info = self.data.personal_info
        links = [
            text for text in (
                f"LinkedIn: {info.linked_in_url}" if info.linked_in_url else "",
                f"Website: {info.website_url}" if info.website_url else "",
            ) if text
        ]
        lines = []
        offset = 16.0
        for text in wrap_text(info.full_name, width, 18, self.measurer, bold=True):
            offset += 18
            lines.append((text, offset, 18, True, WHITE))
            offset += 6
        for text in pack_items(info.contact_parts(), width, 9, measurer=self.measurer):
            offset += 10
            lines.append((text, offset, 9, False, gray(0.92)))
            offset += 3
        for text in pack_items(links, width, 8, measurer=self.measurer):
            offset += 9
            lines.append((text, offset, 8, False, gray(0.85)))
            offset += 3
        return lines, max(float(self.MIN_BAND_HEIGHT), offset + 14)

    def draw_chrome(self, page: Page):
        if page.number == 1:
            page.draw_rectangle(0, page.height - self.band_height, page.width, self.band_height,
                                color=self.ACCENT, tag=CHROME)
            return

        page.draw_rectangle(0, page.height - self.COMPACT_BAND_HEIGHT, page.width, self.COMPACT_BAND_HEIGHT,
                            color=self.ACCENT, tag=CHROME)
        names = [text for text, _, _, bold, _ in self.band_lines if bold]
        if names:
            page.draw_text(names[0], self.MARGIN, page.height - 19, 11, self.bold_font, WHITE, tag=CHROME)

    def setup_columns(self, ctx: RenderContext):
        ctx.add_column(
            MAIN,
            self.MARGIN,
            ctx.width - 2 * self.MARGIN,
            top=ctx.height - self.band_height - self.BODY_GAP,
            continuation_top=ctx.height - self.COMPACT_BAND_HEIGHT - self.BODY_GAP,
        )

    def draw_identity(self, ctx: RenderContext):
        page = ctx.page(ctx.columns[MAIN])
        for text, offset, size, bold, color in self.band_lines:
            font = self.bold_font if bold else self.regular_font
            page.draw_text(text, self.MARGIN, ctx.height - offset, size, font, color)


class ModernTwoColumnLayout(SectionWalker):
    """Dark full-height sidebar (identity, contact, education, skills) beside the content column"""

    SIDEBAR_RATIO = 0.33
    PADDING = 15
    TOP_PADDING = 30
    SIDEBAR_FILL = Color(0.25, 0.25, 0.3)

    geometry = VariantGeometry(
        variant=DesignVariant.MODERN_TWO_COLUMN,
        thresholds=PaginationThresholds(
            bottom_margin=40,
            min_space_for_section=45,
            min_space_for_entry_header=40,
            min_space_for_line=9,
        ),
        styles={
            SIDE: ColumnStyle(
                title_color=WHITE,
                headline_color=WHITE,
                body_color=gray(0.9),
                meta_color=gray(0.8),
                rule_color=gray(0.6),
                title_size=9,
                headline_size=9,
                meta_size=8,
                body_size=8,
                small_size=7,
                title_gap=12,
                rule_gap=10,
                bullet_indent=0,
                entry_gap=6,
                section_gap=12,
                badge_fill=Color(0.33, 0.33, 0.4),
                badge_border=Color(0.5, 0.5, 0.56),
            ),
            MAIN: ColumnStyle(
                title_color=BLACK,
                headline_color=BLACK,
                body_color=gray(0.2),
                meta_color=gray(0.4),
                rule_color=BLACK,
                title_size=10,
                headline_size=10,
                meta_size=8,
                body_size=8,
                title_gap=12,
                rule_gap=10,
                rule_thickness=1,
                bullet_indent=8,
                entry_gap=10,
                section_gap=12,
            ),
        },
        placement={"summary": MAIN, "experience": MAIN, "education": SIDE, "skills": SIDE},
        titles={
            "summary": "PROFILE",
            "experience": "PROFESSIONAL EXPERIENCE",
            "education": "EDUCATION",
            "skills": "SKILLS",
        },
        rule_under_summary=True,
        skills_layout="badges",
    )

    @property
    def sidebar_width(self) -> float:
        return PAGE_WIDTH * self.SIDEBAR_RATIO

    def draw_chrome(self, page: Page):
        page.draw_rectangle(0, 0, self.sidebar_width, page.height, color=self.SIDEBAR_FILL, tag=CHROME)

    def setup_columns(self, ctx: RenderContext):
        top = ctx.height - self.TOP_PADDING
        ctx.add_column(SIDE, self.PADDING, self.sidebar_width - 2 * self.PADDING, top)
        ctx.add_column(MAIN, self.sidebar_width + self.PADDING,
                       ctx.width - self.sidebar_width - 2 * self.PADDING, top)

    def draw_identity(self, ctx: RenderContext):
        column = ctx.columns[SIDE]
        style = self.style_for(column)
        info = self.data.personal_info

        if info.full_name:
            self.paragraph(ctx, column, info.full_name, 15, WHITE, bold=True, break_words=True)
            ctx.advance(column, 2)
        if info.email:
            self.paragraph(ctx, column, info.email, style.meta_size, style.meta_color, break_words=True)
        ctx.advance(column, 14)
        self.sidebar_contact(ctx, column)

    def experience_meta(self, ctx: RenderContext, column: Column, style: ColumnStyle, entry: ExperienceEntry):
        """Company on the left, dates right-aligned on the same line"""
        dates = format_date_range(entry.start_date, entry.end_date, entry.is_current)
        size = style.meta_size
        company_width = self.text_width(entry.company, size)
        dates_width = self.text_width(dates, size)

        if company_width + dates_width + 10 > column.width:
            for text in (entry.company, dates):
                if text:
                    self.paragraph(ctx, column, text, size, style.meta_color)
            return
        if not (entry.company or dates):
            return

        page = ctx.ensure_space(column, max(leading(size), ctx.thresholds.min_space_for_line))
        if entry.company:
            page.draw_text(entry.company, column.x, column.cursor, size, self.regular_font, style.meta_color)
        if dates:
            page.draw_text(dates, column.right - dates_width, column.cursor, size,
                           self.regular_font, style.meta_color)
        ctx.advance(column, leading(size) + 2)

    def education_details(self, entry: EducationEntry, style: ColumnStyle) -> List[Tuple[str, float]]:
        details = []
        if entry.institution:
            details.append((entry.institution, style.meta_size))
        year_grade = f" {BULLET} ".join(part for part in (entry.year, entry.grade) if part)
        if year_grade:
            details.append((year_grade, style.small_size))
        return details


class ModernMinimalLayout(SectionWalker):
    """Two-tone beige layout with a photo placeholder and dotted separators"""

    SIDEBAR_RATIO = 0.35
    PADDING = 15
    TOP_PADDING = 30
    PHOTO_RADIUS = 25
    SIDEBAR_FILL = Color(0.91, 0.87, 0.83)
    CONTENT_FILL = Color(0.96, 0.95, 0.92)

    geometry = VariantGeometry(
        variant=DesignVariant.MODERN_MINIMAL,
        thresholds=PaginationThresholds(
            bottom_margin=40,
            min_space_for_section=45,
            min_space_for_entry_header=40,
            min_space_for_line=9,
        ),
        styles={
            SIDE: ColumnStyle(
                title_color=gray(0.2),
                headline_color=gray(0.1),
                body_color=gray(0.3),
                meta_color=gray(0.3),
                rule_color=gray(0.6),
                title_size=9,
                headline_size=9,
                meta_size=8,
                body_size=8,
                small_size=7,
                title_gap=10,
                rule_gap=9,
                bullet_indent=0,
                entry_gap=6,
                section_gap=12,
            ),
            MAIN: ColumnStyle(
                title_color=gray(0.2),
                headline_color=gray(0.1),
                body_color=gray(0.2),
                meta_color=gray(0.4),
                rule_color=gray(0.6),
                title_size=10,
                headline_size=9,
                meta_size=8,
                body_size=8,
                title_gap=12,
                rule_gap=10,
                separator="dots",
                title_marker=True,
                bullet_indent=8,
                entry_gap=8,
                section_gap=10,
            ),
        },
        placement={"summary": MAIN, "experience": MAIN, "education": SIDE, "skills": SIDE},
        titles={
            "summary": "PROFILE",
            "experience": "WORK EXPERIENCE",
            "education": "EDUCATION",
            "skills": "SKILLS",
        },
        rule_under_summary=True,
        skills_layout="list",
    )

    @property
    def sidebar_width(self) -> float:
        return PAGE_WIDTH * self.SIDEBAR_RATIO

    def draw_chrome(self, page: Page):
        page.draw_rectangle(0, 0, self.sidebar_width, page.height, color=self.SIDEBAR_FILL, tag=CHROME)
        page.draw_rectangle(self.sidebar_width, 0, page.width - self.sidebar_width, page.height,
                            color=self.CONTENT_FILL, tag=CHROME)

    def setup_columns(self, ctx: RenderContext):
        photo_bottom = ctx.height - self.PADDING - 2 * self.PHOTO_RADIUS
        ctx.add_column(SIDE, self.PADDING, self.sidebar_width - 2 * self.PADDING,
                       top=photo_bottom - 22, continuation_top=ctx.height - self.TOP_PADDING)
        ctx.add_column(MAIN, self.sidebar_width + self.PADDING,
                       ctx.width - self.sidebar_width - 2 * self.PADDING, ctx.height - self.TOP_PADDING)

    def draw_identity(self, ctx: RenderContext):
        column = ctx.columns[SIDE]
        style = self.style_for(column)
        info = self.data.personal_info
        page = ctx.page(column)

        center_x = self.sidebar_width / 2
        center_y = ctx.height - self.PADDING - self.PHOTO_RADIUS
        page.draw_circle(center_x, center_y, self.PHOTO_RADIUS, color=WHITE,
                         border_color=self.CONTENT_FILL, border_width=3)
        label_width = self.text_width("Photo", 7)
        page.draw_text("Photo", center_x - label_width / 2, center_y - 2.5, 7, self.regular_font, gray(0.6))

        name_parts = info.full_name.split()
        if name_parts:
            self.paragraph(ctx, column, name_parts[0], 13, gray(0.1), bold=True, center=True)
        if len(name_parts) > 1:
            self.paragraph(ctx, column, " ".join(name_parts[1:]), 13, gray(0.1), bold=True, center=True)
        if info.email:
            ctx.advance(column, 2)
            self.paragraph(ctx, column, info.email, style.meta_size, style.meta_color,
                           center=True, break_words=True)
        ctx.advance(column, 12)
        self.sidebar_contact(ctx, column, include_email=True)

    def experience_meta(self, ctx: RenderContext, column: Column, style: ColumnStyle, entry: ExperienceEntry):
        """Company followed by the date range in parentheses"""
        dates = format_date_range(entry.start_date, entry.end_date, entry.is_current)
        if entry.company and dates:
            meta = f"{entry.company} ({dates})"
        else:
            meta = entry.company or dates
        if meta:
            self.paragraph(ctx, column, meta, style.meta_size, style.meta_color)

    def education_details(self, entry: EducationEntry, style: ColumnStyle) -> List[Tuple[str, float]]:
        details = []
        if entry.year:
            details.append((f"({entry.year})", style.meta_size))
        if entry.institution:
            details.append((entry.institution, style.meta_size))
        if entry.grade:
            details.append((f"GPA: {entry.grade}", style.small_size))
        return details


LAYOUTS: Dict[DesignVariant, Type[SectionWalker]] = {
    DesignVariant.CLASSIC: ClassicLayout,
    DesignVariant.MODERN_SIDEBAR: ModernSidebarLayout,
    DesignVariant.MODERN_TWO_COLUMN: ModernTwoColumnLayout,
    DesignVariant.MODERN_MINIMAL: ModernMinimalLayout,
}


def get_layout(variant: DesignVariant) -> Type[SectionWalker]:
    """Layout class for a variant; exactly one runs per render"""
    return LAYOUTS[variant]
