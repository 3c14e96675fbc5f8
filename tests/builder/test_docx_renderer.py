"""
Tests for DOCX rendering with python-docx.

Verified by reading back paragraphs, tables, header/footer XML and core
properties of the rendered document.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import docx
import pytest
from docx.enum.text import WD_ALIGN_PARAGRAPH

from kahoot_toolkit.builder.config import RenderConfig
from kahoot_toolkit.builder.output import render_document, write_document
from kahoot_toolkit.core.errors import ConversionError, RenderError
from kahoot_toolkit.core.models import QuestionCollection
from kahoot_toolkit.extractor import extract_questions


@pytest.fixture
def collection(result_1_grid):
    return extract_questions(result_1_grid)


def _texts(document):
    return [p.text for p in document.paragraphs]


class TestRenderDocument:
    """Tests for render_document()."""

    def test_render_when_result_1_then_blocks_in_order(self, collection):
        document = render_document(collection, RenderConfig())

        assert _texts(document) == [
            "Kahoot: Test Questions for XLSX2Word (1)",
            "Question No 1",
            "What is the capital of France?",
            "Question No 2",
            "Which of these are prime numbers?",
            "Question No 3",
            "Is the following statement right or wrong?",
            '"Beijing is the capital of China."',
            "The statement is RIGHT.",
        ]

    def test_render_when_choice_questions_then_one_table_row_per_option(self, collection):
        document = render_document(collection, RenderConfig())

        assert len(document.tables) == 2
        rows = [[cell.text for cell in row.cells] for row in document.tables[0].rows]
        assert rows == [
            ["Paris", "Right"],
            ["London", "Wrong"],
            ["Rome", "Wrong"],
            ["Madrid", "Wrong"],
        ]
        assert len(document.tables[1].rows) == 4

    def test_render_when_title_then_bold_and_centered(self, collection):
        title = render_document(collection, RenderConfig()).paragraphs[0]
        assert title.runs[0].bold is True
        assert title.alignment == WD_ALIGN_PARAGRAPH.CENTER

    def test_render_when_true_false_then_verdict_word_bold_italic(self, collection):
        verdict = render_document(collection, RenderConfig()).paragraphs[-1]
        word = verdict.runs[1]
        assert word.text == "RIGHT"
        assert word.bold is True and word.italic is True

    def test_render_when_german_then_translated_texts(self, collection):
        document = render_document(collection, RenderConfig(language="de"))
        texts = _texts(document)
        assert "Frage Nr. 1" in texts
        assert "Die Aussage ist RICHTIG." in texts
        assert document.tables[0].rows[0].cells[1].text == "Richtig"

    def test_render_when_statement_false_then_wrong_verdict(self, make_grid):
        grid = make_grid("T", [("The sun is cold.", ["True", "False"], ["✘", "✔"], 0.4)])
        document = render_document(extract_questions(grid), RenderConfig())
        assert _texts(document)[-1] == "The statement is WRONG."

    def test_render_when_percentages_enabled_then_line_per_question(self, collection):
        document = render_document(collection, RenderConfig(show_percentages=True))
        texts = _texts(document)
        assert "75.0% of players gave the correct answer." in texts
        assert "100.0% of players gave the correct answer." in texts

    def test_render_when_empty_collection_then_title_only(self):
        document = render_document(QuestionCollection("Empty"), RenderConfig())
        assert _texts(document) == ["Kahoot: Empty"]

    def test_render_when_unknown_kind_then_raises_render_error(self):
        collection = QuestionCollection("Broken")
        collection.add(SimpleNamespace(kind="essay", percentage_correct=0.0))
        with pytest.raises(RenderError, match="Unknown question kind"):
            render_document(collection, RenderConfig())


class TestHeaderFooter:
    """Tests for page footer fields and the topline header."""

    def test_footer_when_rendered_then_page_and_numpages_fields(self, collection):
        document = render_document(collection, RenderConfig())
        footer_xml = document.sections[0].footer.paragraphs[0]._p.xml
        assert 'w:fldCharType="begin"' in footer_xml
        assert " PAGE " in footer_xml
        assert " NUMPAGES " in footer_xml
        assert "Page " in footer_xml and " of " in footer_xml

    def test_header_when_topline_then_text_on_every_page(self, collection):
        document = render_document(collection, RenderConfig(topline="  Class 7b  "))
        assert document.sections[0].header.paragraphs[0].text == "Class 7b"

    def test_header_when_no_topline_then_not_defined(self, collection):
        document = render_document(collection, RenderConfig(topline="   "))
        assert document.sections[0].header.is_linked_to_previous is True


class TestMetadataAndWrite:
    """Tests for core properties and write_document()."""

    def test_metadata_when_rendered_then_title_and_creator(self, collection):
        config = RenderConfig(creator="kahoot_toolkit test")
        properties = render_document(collection, config).core_properties
        assert properties.title == "Test Questions for XLSX2Word (1)"
        assert properties.author == "kahoot_toolkit test"
        assert properties.last_modified_by == "kahoot_toolkit test"
        assert properties.created is not None

    def test_metadata_when_saved_then_created_is_current_utc_time(self, collection, tmp_path):
        target = write_document(render_document(collection, RenderConfig()), tmp_path / "out.docx")
        created = docx.Document(str(target)).core_properties.created
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        assert abs((datetime.now(timezone.utc) - created).total_seconds()) < 120

    def test_write_when_docx_path_then_readable(self, collection, tmp_path):
        target = write_document(render_document(collection, RenderConfig()), tmp_path / "out.docx")
        reopened = docx.Document(str(target))
        assert reopened.paragraphs[1].text == "Question No 1"

    def test_write_when_wrong_suffix_then_raises_error(self, collection, tmp_path):
        with pytest.raises(ConversionError, match='does not end with ".docx"'):
            write_document(render_document(collection, RenderConfig()), tmp_path / "out.doc")

    def test_write_when_folder_missing_then_wraps_os_error(self, collection, tmp_path):
        with pytest.raises(ConversionError, match="Error when trying to write output file"):
            write_document(
                render_document(collection, RenderConfig()),
                tmp_path / "missing" / "out.docx",
            )
