"""
Tests for PDF rendering with ReportLab.
"""

import re
from pathlib import Path

import pytest
import reportlab
from reportlab.pdfbase import pdfmetrics

from kahoot_toolkit.builder.config import RenderConfig
from kahoot_toolkit.builder.output import render_pdf
from kahoot_toolkit.core.errors import ConversionError
from kahoot_toolkit.extractor import extract_questions

VERA_TTF = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"


@pytest.fixture
def config():
    return RenderConfig(output_format="pdf")


class TestRenderPdf:
    """Tests for render_pdf()."""

    def test_render_when_result_1_then_writes_pdf(self, result_1_grid, config, tmp_path):
        target = render_pdf(extract_questions(result_1_grid), config, tmp_path / "out.pdf")

        assert target == tmp_path / "out.pdf"
        assert target.read_bytes().startswith(b"%PDF")

    def test_render_when_many_questions_then_multiple_pages(self, make_grid, config, tmp_path):
        questions = [
            (f"Question {n} with <markup> & symbols?", ["a", "b", "c", "d"], ["✔", "✘", "✘", "✘"], 0.5)
            for n in range(40)
        ]
        collection = extract_questions(make_grid("Long quiz", questions))
        target = render_pdf(collection, RenderConfig(output_format="pdf", topline="Class 7b"), tmp_path / "long.pdf")

        page_counts = [int(n) for n in re.findall(rb"/Count (\d+)", target.read_bytes())]
        assert max(page_counts) >= 2

    def test_render_when_german_with_percentages_then_writes_pdf(self, result_2_grid, tmp_path):
        config = RenderConfig(language="de", show_percentages=True, output_format="pdf")
        target = render_pdf(extract_questions(result_2_grid), config, tmp_path / "de.pdf")
        assert target.stat().st_size > 0

    def test_render_when_wrong_suffix_then_raises_error(self, result_1_grid, config, tmp_path):
        with pytest.raises(ConversionError, match='does not end with ".pdf"'):
            render_pdf(extract_questions(result_1_grid), config, tmp_path / "out.docx")
        assert not (tmp_path / "out.docx").exists()


class TestPdfFont:
    """Tests for the TrueType font option."""

    def test_render_when_ttf_font_then_registered_and_embedded(self, make_grid, tmp_path):
        grid = make_grid("Größenquiz", [("Der Ölberg liegt in Jerusalem.", ["True", "False"], ["✔", "✘"], 1.0)])
        config = RenderConfig(output_format="pdf", pdf_font_path=str(VERA_TTF), topline="Klasse 7b")

        target = render_pdf(extract_questions(grid), config, tmp_path / "ttf.pdf")

        assert "Kahoot-Vera" in pdfmetrics.getRegisteredFontNames()
        assert b"FontFile2" in target.read_bytes()

    def test_render_when_font_missing_then_raises_error(self, result_1_grid, tmp_path):
        config = RenderConfig(output_format="pdf", pdf_font_path=str(tmp_path / "missing.ttf"))
        with pytest.raises(ConversionError, match="Could not load PDF font"):
            render_pdf(extract_questions(result_1_grid), config, tmp_path / "out.pdf")

    def test_render_when_not_a_font_then_raises_error(self, result_1_grid, tmp_path):
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font")
        config = RenderConfig(output_format="pdf", pdf_font_path=str(bogus))
        with pytest.raises(ConversionError, match="Could not load PDF font"):
            render_pdf(extract_questions(result_1_grid), config, tmp_path / "out.pdf")
