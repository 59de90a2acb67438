"""
Integration tests for PDF generation.
Tests: resume record -> generate_pdf() -> PDF bytes -> extracted text.
"""

from datetime import date
from io import BytesIO
from pathlib import Path

import pytest
from PyPDF2 import PdfReader

from resumely.contexts.records import load_resume_record
from resumely.contexts.rendering import (
    DEFAULT_PLACEHOLDERS,
    FontPair,
    RenderError,
    generate_pdf,
)
from resumely.contexts.rendering import assembler
from resumely.contexts.rendering.defaults import MARGIN, PAGE_WIDTH, TWO_COLUMN, get_layout
from resumely.utils.pdf_processing import PDFDocument, normalize_for_matching, page_count

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
GENERATED_ON = date(2024, 6, 5)


def _render(record, **kwargs):
    kwargs.setdefault("generated_on", GENERATED_ON)
    return generate_pdf(record, **kwargs)


def _normalized_lines(pdf_bytes):
    return [normalize_for_matching(line) for line in PDFDocument(pdf_bytes).get_lines()]


def _two_column_split() -> float:
    """Page-width ratio of the divider between sidebar and main column."""
    layout = get_layout(TWO_COLUMN)
    content_width = PAGE_WIDTH - 2 * MARGIN
    left_width = (content_width - layout.gutter) * layout.left_column_ratio
    return (MARGIN + left_width + layout.gutter / 2) / PAGE_WIDTH


@pytest.mark.integration
def test_minimal_record_renders_with_placeholders():
    """A record holding only a name renders a one-page PDF with placeholder content."""
    pdf_bytes = _render({"name": "Ada Lovelace"}, placeholders=DEFAULT_PLACEHOLDERS)

    assert pdf_bytes.startswith(b"%PDF")
    assert page_count(pdf_bytes) == 1

    pdf = PDFDocument(pdf_bytes)
    assert pdf.find("Ada Lovelace", whole_line=True)
    assert pdf.find(DEFAULT_PLACEHOLDERS.phone, whole_line=True)
    assert pdf.find("Professional Summary", whole_line=True)
    assert pdf.find("Skills", whole_line=True)
    assert pdf.find(", ".join(DEFAULT_PLACEHOLDERS.skills))
    job = DEFAULT_PLACEHOLDERS.job
    assert pdf.find(f"{job.position} at {job.company}", whole_line=True)
    assert pdf.find("Generated on 6/5/2024", whole_line=True)


@pytest.mark.integration
def test_minimal_record_without_placeholders():
    pdf = PDFDocument(_render({"name": "Ada Lovelace"}, placeholders=None))

    assert pdf.find("Ada Lovelace", whole_line=True)
    assert pdf.find("Skills", whole_line=True) is None
    assert pdf.find("Professional Experience", whole_line=True) is None


@pytest.mark.integration
@pytest.mark.parametrize("layout", ["single_column", "two_column"])
def test_empty_skills_has_no_skills_header(layout):
    record = {
        "name": "Ada Lovelace",
        "summary": "Mathematician.",
        "skills": [],
        "experience": [{"company": "Engines Ltd", "position": "Analyst", "startDate": "2020-01-01"}],
    }

    pdf = PDFDocument(_render(record, layout=layout, placeholders=DEFAULT_PLACEHOLDERS))

    assert pdf.find("Skills", whole_line=True) is None
    assert pdf.find("Analyst at Engines Ltd")


@pytest.mark.integration
def test_current_experience_shows_present():
    """The end bound of a current job is "Present" even when an end date is stored."""
    record = {
        "name": "Ada Lovelace",
        "experience": [{
            "company": "Engines Ltd",
            "position": "Analyst",
            "startDate": "2018-01-15T00:00:00.000Z",
            "endDate": "2019-11-30T00:00:00.000Z",
            "current": True,
            "description": "Wrote the first program.",
        }],
    }

    pdf = PDFDocument(_render(record, placeholders=None))

    assert pdf.find("Jan 2018 - Present", whole_line=True)
    assert pdf.find("Nov 2019") is None


@pytest.mark.integration
def test_skill_order_only_changes_skills_line():
    """Swapping two skills changes only the order of those tokens on the skills line."""
    base = {
        "name": "Ada Lovelace",
        "summary": "Mathematician and writer.",
        "contact": {"phone": "555-0100"},
        "experience": [],
    }

    first = _normalized_lines(_render({**base, "skills": ["Python", "Go"]}))
    second = _normalized_lines(_render({**base, "skills": ["Go", "Python"]}))

    assert len(first) == len(second)
    differences = [(a, b) for a, b in zip(first, second) if a != b]
    assert differences == [("pythongo", "gopython")]


@pytest.mark.integration
def test_output_is_deterministic():
    record = load_resume_record(FIXTURES_PATH / "extended_resume.yaml")

    assert _render(record) == _render(record)


@pytest.mark.integration
def test_extended_record_single_column():
    record = load_resume_record(FIXTURES_PATH / "extended_resume.yaml")
    pdf = PDFDocument(_render(record))

    assert pdf.page_count == 1
    for header in (
        "Professional Summary",
        "Skills",
        "Professional Experience",
        "Education",
        "Languages",
        "Certifications",
        "Projects",
        "Awards",
        "Volunteer",
        "Hobbies",
    ):
        assert pdf.find(header, whole_line=True), header

    assert pdf.find("Staff Engineer at Acme Analytics", whole_line=True)
    assert pdf.find("Mar 2021 - Present | Full-time | San Francisco, CA", whole_line=True)
    assert pdf.find("B.Sc. in Computer Science", whole_line=True)
    assert pdf.find("Sep 2023 - Present", whole_line=True)
    assert pdf.find("GPA: 3.8", whole_line=True)
    assert pdf.find("English (Native), French (Advanced)", whole_line=True)
    assert pdf.find("Certified Kubernetes Administrator - CNCF", whole_line=True)
    assert pdf.find("Technologies: Go, PostgreSQL", whole_line=True)

    # Header order follows the fixed section sequence
    lines = [normalize_for_matching(line) for line in pdf.get_lines()]
    order = [lines.index(header) for header in ("skills", "professionalexperience", "education")]
    assert order == sorted(order)


@pytest.mark.integration
def test_extended_record_two_column():
    """Sidebar holds skills and education; the main column holds work history."""
    record = load_resume_record(FIXTURES_PATH / "extended_resume.yaml")
    pdf = PDFDocument(_render(record, layout=TWO_COLUMN), column_splits=[_two_column_split()])

    assert pdf.page_count == 1
    for header in ("Skills", "Education", "Certifications", "Awards", "Hobbies"):
        assert pdf.find(header, whole_line=True, column=0), header
    assert pdf.find("Work History", whole_line=True, column=1)
    assert pdf.find("Projects", whole_line=True, column=1)
    assert pdf.find("Work History", column=0) is None
    assert pdf.find("Staff Engineer at Acme Analytics", column=1)


@pytest.mark.integration
def test_template_id_selects_layout():
    record = {"name": "Ada Lovelace", "templateId": "tech-modern"}
    pdf = PDFDocument(
        _render(record, placeholders=DEFAULT_PLACEHOLDERS), column_splits=[_two_column_split()]
    )

    assert pdf.find("Work History", whole_line=True, column=1)
    assert pdf.find("Skills", whole_line=True, column=0)
    assert pdf.find("Professional Experience") is None


@pytest.mark.integration
def test_legacy_record_renders():
    record = load_resume_record(FIXTURES_PATH / "legacy_resume.json")
    pdf = PDFDocument(_render(record, placeholders=None))

    assert pdf.find("John Smith", whole_line=True)
    assert pdf.find("Reporter at Daily Planet", whole_line=True)
    assert pdf.find("Jul 2012 - Present", whole_line=True)
    assert pdf.find("Sep 2008 - May 2012", whole_line=True)


@pytest.mark.integration
def test_overflowing_content_stays_on_one_page():
    """Content past the bottom edge is not paginated and is not an error."""
    experience = [
        {
            "company": f"Company {i}",
            "position": "Engineer",
            "startDate": "2010-01-01",
            "endDate": "2011-01-01",
            "description": "Built and operated services. " * 10,
            "achievements": ["Shipped features"] * 3,
        }
        for i in range(20)
    ]

    pdf_bytes = _render({"name": "Ada Lovelace", "experience": experience})

    assert page_count(pdf_bytes) == 1


@pytest.mark.integration
def test_unknown_font_fails_once_without_output():
    """A font that cannot be set up yields one RenderError and no bytes."""
    result = None

    with pytest.raises(RenderError) as excinfo:
        result = _render({"name": "Ada Lovelace"}, fonts=FontPair(regular="NoSuchFont-Regular"))

    assert result is None
    assert excinfo.value.resume_name == "Ada Lovelace"
    assert excinfo.value.original_error is not None
    assert excinfo.value.__cause__ is excinfo.value.original_error


@pytest.mark.integration
def test_missing_truetype_file_fails(tmp_path):
    fonts = FontPair(regular="Custom", bold="Custom-Bold", regular_path=str(tmp_path / "missing.ttf"))

    with pytest.raises(RenderError, match="Failed to generate PDF"):
        _render({"name": "Ada Lovelace"}, fonts=fonts)


@pytest.mark.integration
def test_font_embedding_failure_is_reported_once(monkeypatch):
    calls = []

    def failing_embed(fonts):
        calls.append(fonts)
        raise OSError("font store unavailable")

    monkeypatch.setattr(assembler, "embed_fonts", failing_embed)

    with pytest.raises(RenderError) as excinfo:
        _render({"name": "Ada Lovelace"})

    assert len(calls) == 1
    assert isinstance(excinfo.value.original_error, OSError)
    assert "font store unavailable" in str(excinfo.value)


@pytest.mark.integration
def test_invalid_record_data_is_a_render_error():
    with pytest.raises(RenderError) as excinfo:
        _render({"name": "Ada", "experience": [{"company": "C", "startDate": "last spring"}]})

    assert isinstance(excinfo.value.original_error, ValueError)
    assert excinfo.value.resume_name == "Ada"


@pytest.mark.integration
def test_unknown_layout_is_a_render_error():
    with pytest.raises(RenderError):
        _render({"name": "Ada"}, layout="three_column")


@pytest.mark.integration
def test_document_metadata():
    """Title and author carry the resume name; page size is A4."""
    reader = PdfReader(BytesIO(_render({"name": "Ada Lovelace"})))

    assert reader.metadata.title == "Ada Lovelace"
    assert reader.metadata.author == "Ada Lovelace"
    assert reader.metadata.creator.startswith("resumely")
    box = reader.pages[0].mediabox
    assert float(box.width) == pytest.approx(PAGE_WIDTH, abs=0.01)


@pytest.mark.integration
def test_flat_string_certifications_and_projects_render():
    record = {
        "name": "Ada Lovelace",
        "certifications": ["AWS Solutions Architect"],
        "projects": ["Difference Engine notes"],
        "languages": ["French"],
    }

    pdf = PDFDocument(_render(record, placeholders=None))

    assert pdf.find("Certifications", whole_line=True)
    assert pdf.find("AWS Solutions Architect", whole_line=True)
    assert pdf.find("Projects", whole_line=True)
    assert pdf.find("Difference Engine notes", whole_line=True)
    assert pdf.find("French (Intermediate)", whole_line=True)


@pytest.mark.integration
def test_unrecognized_enum_values_do_not_fail_render():
    record = {
        "name": "Ada Lovelace",
        "experience": [{
            "company": "Engines Ltd",
            "position": "Analyst",
            "startDate": "2020-01-01",
            "endDate": "2021-01-01",
            "employmentType": "seasonal",
        }],
        "languages": [{"name": "English", "proficiency": "fluent"}],
    }

    pdf = PDFDocument(_render(record, placeholders=None))

    assert pdf.find("Jan 2020 - Jan 2021", whole_line=True)
    assert pdf.find("English (Intermediate)", whole_line=True)
