"""
Module: builder.output.docx_renderer

Purpose:
    Render a QuestionCollection to a Word document using python-docx.
    Produces the title block, one block per question (answer table for
    choice questions, statement and verdict for true/false questions),
    a "Page x of y" footer built from live PAGE/NUMPAGES fields, an
    optional topline header and the document metadata.

Key Functions:
    - render_document(): QuestionCollection -> docx Document
    - write_document(): Save a Document to a .docx path

Dependencies:
    - python-docx: DOCX generation
    - builder.config: RenderConfig
    - builder.texts: Translated fixed texts

Used By:
    - builder.controller: Conversion pipeline
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

import docx
from docx.document import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt
from docx.text.paragraph import Paragraph

from kahoot_toolkit.builder.config import RenderConfig
from kahoot_toolkit.builder.texts import TextBundle, load_texts
from kahoot_toolkit.core.errors import ConversionError, RenderError
from kahoot_toolkit.core.models import (
    ChoiceQuestion,
    Question,
    QuestionCollection,
    QuestionKind,
    TrueFalseQuestion,
)

logger = logging.getLogger(__name__)

DOCX_SUFFIX = ".docx"
TABLE_STYLE = "Table Grid"
QUESTION_SPACING_PT = 12


def render_document(collection: QuestionCollection, config: RenderConfig) -> Document:
    """
    Render questions to a new Word document.

    Questions are rendered in collection order, numbered from 1.

    Args:
        collection: Extracted questions and game title
        config: Language, topline and font settings

    Returns:
        python-docx Document (not yet saved)

    Raises:
        RenderError: A question has an unknown kind (internal error)

    Example:
        >>> document = render_document(collection, RenderConfig(language="de"))
        >>> write_document(document, Path("result.docx"))
    """
    texts = load_texts(config.language)
    document = docx.Document()

    _add_title(document, collection.title, texts, config)

    for number, question in enumerate(collection, start=1):
        _add_question(document, number, question, texts, config)

    _add_footer(document, texts, config)
    if config.has_topline:
        _add_header(document, config.topline.strip(), config)

    _set_metadata(document, collection.title, config)

    logger.debug(f"Rendered {collection.question_count()} questions to DOCX")
    return document


def write_document(document: Document, output_path: Union[str, Path]) -> Path:
    """
    Save a rendered document.

    Args:
        document: Result of render_document()
        output_path: Target path, must end with ".docx"

    Returns:
        Path written

    Raises:
        ConversionError: Wrong suffix or the file could not be written
    """
    output_path = Path(output_path)
    if not output_path.name.endswith(DOCX_SUFFIX):
        raise ConversionError(
            f'Target file name "{output_path}" does not end with "{DOCX_SUFFIX}".'
        )
    try:
        document.save(str(output_path))
    except OSError as exc:
        raise ConversionError(f'Error when trying to write output file "{output_path}".') from exc
    return output_path


# ─────────────────────────────────────────────────────────────────────────────
# Blocks
# ─────────────────────────────────────────────────────────────────────────────

def _add_title(document: Document, title: str, texts: TextBundle, config: RenderConfig) -> None:
    paragraph = document.add_paragraph()
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = paragraph.add_run(f"{texts.get('title_label')} {title}".strip())
    run.bold = True
    run.font.size = Pt(config.title_font_size)


def _add_question(
    document: Document,
    number: int,
    question: Question,
    texts: TextBundle,
    config: RenderConfig,
) -> None:
    heading = document.add_paragraph()
    heading.paragraph_format.space_before = Pt(QUESTION_SPACING_PT)
    run = heading.add_run(texts.get("question_heading", number=number))
    run.bold = True
    run.font.size = Pt(config.heading_font_size)

    if question.kind is QuestionKind.TRUE_OR_FALSE:
        _add_true_false(document, question, texts, config)
    elif question.kind in (QuestionKind.SINGLE_CHOICE, QuestionKind.MULTIPLE_CHOICE):
        _add_choice(document, question, texts, config)
    else:
        raise RenderError(f"Unknown question kind {question.kind!r} for question {number}.")

    if config.show_percentages:
        _add_text(document, texts.get("percentage_correct", percentage=question.percentage_correct), config)


def _add_true_false(
    document: Document,
    question: TrueFalseQuestion,
    texts: TextBundle,
    config: RenderConfig,
) -> None:
    _add_text(document, texts.get("true_false_prompt"), config)

    statement = _add_text(document, f'"{question.statement_text}"', config)
    statement.runs[0].italic = True

    verdict = _add_text(document, texts.get("statement_is"), config)
    word = texts.get("statement_right" if question.is_statement_true else "statement_wrong")
    run = verdict.add_run(word)
    run.bold = True
    run.italic = True
    run.font.size = Pt(config.body_font_size)
    verdict.add_run(".").font.size = Pt(config.body_font_size)


def _add_choice(
    document: Document,
    question: ChoiceQuestion,
    texts: TextBundle,
    config: RenderConfig,
) -> None:
    _add_text(document, question.prompt_text, config)

    table = document.add_table(rows=0, cols=2)
    table.style = TABLE_STYLE
    for option in question.options:
        cells = table.add_row().cells
        label = texts.get("answer_right" if option.is_correct else "answer_wrong")
        _set_cell_text(cells[0], option.text, config)
        _set_cell_text(cells[1], label, config)


def _add_text(document: Document, text: str, config: RenderConfig) -> Paragraph:
    paragraph = document.add_paragraph()
    run = paragraph.add_run(text)
    run.font.size = Pt(config.body_font_size)
    return paragraph


def _set_cell_text(cell, text: str, config: RenderConfig) -> None:
    paragraph = cell.paragraphs[0]
    run = paragraph.add_run(text)
    run.font.size = Pt(config.body_font_size)


# ─────────────────────────────────────────────────────────────────────────────
# Header / footer / metadata
# ─────────────────────────────────────────────────────────────────────────────

def _add_footer(document: Document, texts: TextBundle, config: RenderConfig) -> None:
    """Centered "Page {PAGE} of {NUMPAGES}" on every page of every section."""
    for section in document.sections:
        paragraph = section.footer.paragraphs[0]
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
        paragraph.add_run(texts.get("page_label"))
        _add_field(paragraph, "PAGE")
        paragraph.add_run(texts.get("page_of"))
        _add_field(paragraph, "NUMPAGES")


def _add_header(document: Document, topline: str, config: RenderConfig) -> None:
    for section in document.sections:
        paragraph = section.header.paragraphs[0]
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = paragraph.add_run(topline)
        run.font.size = Pt(config.body_font_size)


def _add_field(paragraph: Paragraph, instruction: str) -> None:
    """
    Append a Word field (e.g. PAGE) that Word evaluates when displaying.

    Emits begin / instrText / separate / placeholder / end runs.
    """
    def fld_char(kind: str):
        element = OxmlElement("w:fldChar")
        element.set(qn("w:fldCharType"), kind)
        return element

    paragraph.add_run()._r.append(fld_char("begin"))

    instr = OxmlElement("w:instrText")
    instr.set(qn("xml:space"), "preserve")
    instr.text = f" {instruction} "
    paragraph.add_run()._r.append(instr)

    paragraph.add_run()._r.append(fld_char("separate"))
    paragraph.add_run("1")
    paragraph.add_run()._r.append(fld_char("end"))


def _set_metadata(document: Document, title: str, config: RenderConfig) -> None:
    now = datetime.now(timezone.utc)
    properties = document.core_properties
    properties.author = config.creator
    properties.last_modified_by = config.creator
    properties.title = title
    properties.created = now
    properties.modified = now
