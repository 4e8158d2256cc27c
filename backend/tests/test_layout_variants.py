"""
Layout tests for the four resume designs

Layouts are inspected through the recorded page operations, so these tests
check positions and pagination without parsing a PDF.
"""

import pytest

from resume_pdf.models.resume import DesignVariant, ResumeData
from resume_pdf.services.layout_variants import (
    LAYOUTS,
    ClassicLayout,
    ModernMinimalLayout,
    ModernSidebarLayout,
    ModernTwoColumnLayout,
    get_layout,
)
from resume_pdf.services.surface import CHROME, Document, PAGE_WIDTH

ALL_TITLES = {
    "PROFESSIONAL SUMMARY", "PROFESSIONAL EXPERIENCE", "WORK EXPERIENCE",
    "PROFILE", "EDUCATION", "SKILLS", "CONTACT",
}


def render(variant, data, fonts, measurer) -> Document:
    regular, bold = fonts
    document = Document()
    get_layout(variant)(data, regular, bold, measurer).render(document)
    return document


def all_texts(document):
    return [text for page in document.pages for text in page.text_content()]


def test_every_variant_has_a_layout():
    assert set(LAYOUTS) == set(DesignVariant)
    assert get_layout(DesignVariant.CLASSIC) is ClassicLayout
    assert get_layout(DesignVariant.MODERN_SIDEBAR) is ModernSidebarLayout
    assert get_layout(DesignVariant.MODERN_TWO_COLUMN) is ModernTwoColumnLayout
    assert get_layout(DesignVariant.MODERN_MINIMAL) is ModernMinimalLayout


@pytest.mark.parametrize("variant", list(DesignVariant))
def test_empty_resume_renders_single_page_without_section_titles(variant, fonts, measurer):
    document = render(variant, ResumeData(), fonts, measurer)

    assert document.page_count == 1
    assert not ALL_TITLES & set(all_texts(document))


def test_empty_classic_resume_has_no_text_at_all(fonts, measurer):
    document = render(DesignVariant.CLASSIC, ResumeData(), fonts, measurer)
    assert all_texts(document) == []


@pytest.mark.parametrize("variant", list(DesignVariant))
def test_sample_resume_renders_all_content(variant, sample_resume, fonts, measurer):
    document = render(variant, sample_resume, fonts, measurer)
    text = " ".join(all_texts(document))

    assert "Jane" in text
    assert "Staff Engineer" in text
    assert "Software Engineer" in text
    assert "BSc Computer Science" in text
    assert "Kubernetes" in text
    assert "Cut build times in half" in text
    assert "Present" in text


@pytest.mark.parametrize("variant", [DesignVariant.CLASSIC, DesignVariant.MODERN_SIDEBAR])
def test_long_description_flows_onto_more_pages(variant, long_resume, fonts, measurer):
    document = render(variant, long_resume, fonts, measurer)
    texts = all_texts(document)

    assert document.page_count >= 2
    for index in range(50):
        marker = f"Sentence{index:03d}"
        assert sum(marker in line for line in texts) == 1


OVERSIZED_SKILL = " ".join(["word"] * 1200)


def lowest_point(op) -> float:
    if op.kind == "circle":
        return op.y - op.radius
    if op.kind == "line":
        return min(op.y, op.y2)
    return op.y


def oversized_skills_resume() -> ResumeData:
    return ResumeData(skills=["Go", OVERSIZED_SKILL, "Rust"])


@pytest.mark.parametrize("variant", list(DesignVariant))
@pytest.mark.parametrize("data_name", ["long_description", "oversized_skill"])
def test_nothing_drawn_below_bottom_margin(variant, data_name, long_resume, fonts, measurer):
    data = long_resume if data_name == "long_description" else oversized_skills_resume()
    bottom = get_layout(variant).geometry.thresholds.bottom_margin
    document = render(variant, data, fonts, measurer)

    for page in document.pages:
        for op in page.ops:
            if op.tag == CHROME:
                continue
            assert lowest_point(op) >= bottom, (page.number, op.kind, op.text, op.y)


@pytest.mark.parametrize("variant", [DesignVariant.CLASSIC, DesignVariant.MODERN_TWO_COLUMN])
def test_skill_taller_than_a_page_continues_on_next_page(variant, fonts, measurer):
    document = render(variant, oversized_skills_resume(), fonts, measurer)
    texts = all_texts(document)

    assert document.page_count >= 2
    assert sum(text.split().count("word") for text in texts) == 1200
    assert any("Go" in text.split() for text in texts)
    assert any("Rust" in text.split() for text in texts)


def test_current_role_shows_present(fonts, measurer):
    data = ResumeData.model_validate({
        "experience": [{
            "position": "Engineer",
            "company": "Future Co",
            "startDate": "2020-01",
            "endDate": "2099-12",
            "isCurrent": True,
        }],
    })
    texts = all_texts(render(DesignVariant.CLASSIC, data, fonts, measurer))

    assert "Future Co | Jan 2020 - Present" in texts
    assert not any("2099" in text for text in texts)


def test_classic_text_stays_inside_margins(sample_resume, long_resume, fonts, measurer):
    margin = ClassicLayout.MARGIN
    for data in (sample_resume, long_resume):
        document = render(DesignVariant.CLASSIC, data, fonts, measurer)
        for page in document.pages:
            for op in page.texts():
                assert op.x >= margin - 0.01
                right = op.x + measurer.width(op.text, op.size)
                assert right <= PAGE_WIDTH - margin + 0.01 or " " not in op.text


def test_classic_skills_grid_uses_three_columns(fonts, measurer):
    data = ResumeData(skills=["Python", "Go", "Rust", "SQL", "Bash"])
    document = render(DesignVariant.CLASSIC, data, fonts, measurer)
    skill_ops = [op for op in document.pages[0].texts() if op.text.startswith("•")]

    assert len(skill_ops) == 5
    assert len({op.x for op in skill_ops}) == 3
    assert len({op.y for op in skill_ops}) == 2


def test_modern_sidebar_band_grows_with_header_content(fonts, measurer):
    short = ModernSidebarLayout(ResumeData(), *fonts, measurer)
    tall = ModernSidebarLayout(
        ResumeData.model_validate({"personalInfo": {
            "fullName": "Maximiliana Alexandra Wolfeschlegelsteinhausen Bergerdorff",
            "email": "maximiliana.wolfeschlegelsteinhausen@example.com",
            "phone": "+49 30 1234 5678",
            "location": "Berlin, Germany",
            "linkedIn": "linkedin.com/in/maximiliana-wolfeschlegelsteinhausen",
            "website": "https://maximiliana-wolfeschlegelsteinhausen.example.com",
        }}),
        *fonts,
        measurer,
    )
    assert short.band_height == ModernSidebarLayout.MIN_BAND_HEIGHT
    assert tall.band_height > ModernSidebarLayout.MIN_BAND_HEIGHT


def test_modern_sidebar_continuation_pages_get_compact_band(long_resume, fonts, measurer):
    document = render(DesignVariant.MODERN_SIDEBAR, long_resume, fonts, measurer)
    first, second = document.pages[0], document.pages[1]

    band = first.ops[0]
    compact = second.ops[0]
    assert band.tag == CHROME and band.kind == "rect"
    assert compact.tag == CHROME and compact.height == ModernSidebarLayout.COMPACT_BAND_HEIGHT
    assert "Long Story" in [op.text for op in second.chrome() if op.kind == "text"]

    # Body text on the continuation page starts below the compact band
    body = [op for op in second.texts() if op.tag != CHROME]
    assert max(op.y for op in body) < second.height - ModernSidebarLayout.COMPACT_BAND_HEIGHT


@pytest.mark.parametrize("variant,backgrounds", [
    (DesignVariant.MODERN_TWO_COLUMN, 1),
    (DesignVariant.MODERN_MINIMAL, 2),
])
def test_sidebar_background_repeats_on_every_page(variant, backgrounds, long_resume, fonts, measurer):
    document = render(variant, long_resume, fonts, measurer)
    assert document.page_count >= 2

    for page in document.pages:
        leading_ops = page.ops[:backgrounds]
        assert all(op.tag == CHROME and op.kind == "rect" for op in leading_ops)
        assert leading_ops[0].x == 0 and leading_ops[0].y == 0
        assert leading_ops[0].height == page.height


def test_two_column_badges_stay_inside_sidebar(fonts, measurer):
    skills = [f"Skill {index}" for index in range(40)]
    layout = ModernTwoColumnLayout(ResumeData(skills=skills), *fonts, measurer)
    document = Document()
    layout.render(document)

    sidebar_right = layout.sidebar_width - ModernTwoColumnLayout.PADDING
    badges = [
        op for page in document.pages for op in page.ops
        if op.kind == "rect" and op.tag != CHROME
    ]
    assert len(badges) == 40
    assert len({op.y for op in badges}) > 1
    for op in badges:
        assert op.x >= ModernTwoColumnLayout.PADDING
        assert op.x + op.width <= sidebar_right + 0.01

    skill_texts = [text for text in all_texts(document) if text.startswith("Skill ")]
    assert skill_texts == skills


def test_two_column_places_sections_in_their_columns(sample_resume, fonts, measurer):
    layout = ModernTwoColumnLayout(sample_resume, *fonts, measurer)
    document = Document()
    layout.render(document)
    by_text = {op.text: op for op in document.pages[0].texts()}

    assert by_text["EDUCATION"].x < layout.sidebar_width
    assert by_text["SKILLS"].x < layout.sidebar_width
    assert by_text["CONTACT"].x < layout.sidebar_width
    assert by_text["PROFILE"].x > layout.sidebar_width
    assert by_text["PROFESSIONAL EXPERIENCE"].x > layout.sidebar_width
    assert "Phone: +1 555 0100" in by_text


def test_two_column_dates_are_right_aligned(sample_resume, fonts, measurer):
    layout = ModernTwoColumnLayout(sample_resume, *fonts, measurer)
    document = Document()
    layout.render(document)
    dates = next(op for op in document.pages[0].texts() if op.text == "Mar 2020 - Present")
    company = next(op for op in document.pages[0].texts() if op.text == "Acme Corp")

    column_right = PAGE_WIDTH - ModernTwoColumnLayout.PADDING
    assert dates.y == company.y
    assert dates.x + measurer.width(dates.text, dates.size) == pytest.approx(column_right)


def test_minimal_layout_has_photo_placeholder_and_split_name(sample_resume, fonts, measurer):
    document = render(DesignVariant.MODERN_MINIMAL, sample_resume, fonts, measurer)
    page = document.pages[0]
    texts = page.text_content()

    circles = [op for op in page.ops if op.kind == "circle" and op.radius == ModernMinimalLayout.PHOTO_RADIUS]
    assert len(circles) == 1
    assert "Photo" in texts
    assert "Jane" in texts and "Doe" in texts
    assert "Acme Corp (Mar 2020 - Present)" in texts
    assert "GPA: 1.3" in texts
    assert "(2015)" in texts


def test_entries_without_content_are_skipped(fonts, measurer):
    data = ResumeData.model_validate({
        "experience": [{"position": "", "company": "", "description": "   "}],
        "education": [{}],
        "skills": ["", "  "],
    })
    texts = all_texts(render(DesignVariant.CLASSIC, data, fonts, measurer))

    assert "PROFESSIONAL EXPERIENCE" not in texts
    assert "EDUCATION" not in texts
    assert "SKILLS" not in texts


def test_every_sentence_becomes_a_bullet(fonts, measurer):
    data = ResumeData.model_validate({
        "experience": [{"position": "Lead", "description": "One. Two! Three? Four. Five. Six."}],
    })
    texts = all_texts(render(DesignVariant.CLASSIC, data, fonts, measurer))
    bullets = [text for text in texts if text.startswith("• ")]

    assert bullets == ["• One", "• Two", "• Three", "• Four", "• Five", "• Six"]


@pytest.mark.parametrize("layout_class", [ModernTwoColumnLayout, ModernMinimalLayout])
def test_sidebar_links_and_skills_stay_inside_sidebar(layout_class, fonts, measurer):
    data = ResumeData.model_validate({
        "personalInfo": {
            "fullName": "Jane Doe",
            "email": "jane.alexandra.doe-consulting@example-company.com",
            "linkedIn": "https://www.linkedin.com/in/jane-doe-1a2b3c4d5e",
            "website": "https://jane-doe-engineering-portfolio.example.dev",
        },
        "skills": ["Supercalifragilisticexpialidocious-Framework-Engineering"],
    })
    layout = layout_class(data, *fonts, measurer)
    document = Document()
    layout.render(document)
    sidebar_right = layout.sidebar_width - layout_class.PADDING

    for op in document.pages[0].ops:
        if op.tag == CHROME or op.x >= layout.sidebar_width:
            continue
        if op.kind == "text" and op.text != "Photo":
            assert op.x + measurer.width(op.text, op.size) <= sidebar_right + 0.01, op.text
        elif op.kind == "rect":
            assert op.x + op.width <= sidebar_right + 0.01

    joined = "".join(all_texts(document))
    assert "https://www.linkedin.com/in/jane-doe-1a2b3c4d5e" in joined
