"""
Module: builder.output.pdf_renderer

Purpose:
    Render a QuestionCollection to PDF using ReportLab. Same blocks and
    ordering as the DOCX renderer: title, numbered questions (answer table
    or statement plus verdict), optional topline on every page and a
    centered "Page x of y" footer.

    The page total is only known once all pages are laid out, so the
    footer is drawn by a two-pass canvas when the file is saved.

    The built-in Helvetica font only covers Latin-1. Quiz texts in other
    scripts (e.g. CJK) need a TrueType font via RenderConfig.pdf_font_path.

Key Functions:
    - render_pdf(): Render collection to a .pdf file

Dependencies:
    - reportlab: PDF generation
    - builder.config: RenderConfig
    - builder.texts: Translated fixed texts

Used By:
    - builder.controller: Conversion pipeline (output_format="pdf")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

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

PDF_SUFFIX = ".pdf"
PAGE_MARGIN = 20 * mm
FOOTER_Y = 10 * mm
HEADER_OFFSET = 10 * mm
BASE_FONT = "Helvetica"
BASE_FONT_BOLD = "Helvetica-Bold"
FOOTER_FONT_SIZE = 9


def render_pdf(
    collection: QuestionCollection,
    config: RenderConfig,
    output_path: Union[str, Path],
) -> Path:
    """
    Render questions to a PDF file.

    Args:
        collection: Extracted questions and game title
        config: Language, topline and font settings
        output_path: Target path, must end with ".pdf"

    Returns:
        Path written

    Raises:
        ConversionError: Wrong suffix or the file could not be written
        RenderError: A question has an unknown kind (internal error)

    Example:
        >>> render_pdf(collection, RenderConfig(output_format="pdf"), Path("result.pdf"))
    """
    output_path = Path(output_path)
    if not output_path.name.endswith(PDF_SUFFIX):
        raise ConversionError(
            f'Target file name "{output_path}" does not end with "{PDF_SUFFIX}".'
        )

    texts = load_texts(config.language)
    fonts = _resolve_fonts(config.pdf_font_path)
    styles = _build_styles(config, fonts)
    story = _build_story(collection, texts, styles, config)

    template = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=collection.title,
        author=config.creator,
        creator=config.creator,
    )
    canvas_class = _numbered_canvas_class(
        font=fonts[0],
        page_label=texts.get("page_label"),
        page_of=texts.get("page_of"),
        topline=config.topline.strip() if config.has_topline else None,
    )

    try:
        template.build(story, canvasmaker=canvas_class)
    except OSError as exc:
        raise ConversionError(f'Error when trying to write output file "{output_path}".') from exc

    logger.debug(f"Rendered {collection.question_count()} questions to {output_path}")
    return output_path


def _resolve_fonts(font_path: Optional[str]) -> Tuple[str, str]:
    """
    Font names (regular, bold) for all PDF text.

    A TrueType font is registered once under a name derived from its file
    name and also used for bold and italic markup.

    Raises:
        ConversionError: Font file missing or not a usable TrueType font
    """
    if not font_path:
        return BASE_FONT, BASE_FONT_BOLD

    name = f"Kahoot-{Path(font_path).stem}"
    if name not in pdfmetrics.getRegisteredFontNames():
        try:
            pdfmetrics.registerFont(TTFont(name, str(font_path)))
        except (TTFError, OSError) as exc:
            raise ConversionError(f'Could not load PDF font "{font_path}".') from exc
        pdfmetrics.registerFontFamily(name, normal=name, bold=name, italic=name, boldItalic=name)
        logger.debug(f"Registered PDF font {name} from {font_path}")
    return name, name


def _build_styles(config: RenderConfig, fonts: Tuple[str, str]) -> dict:
    regular, bold = fonts
    base = getSampleStyleSheet()["Normal"]
    return {
        "title": ParagraphStyle(
            "KahootTitle",
            parent=base,
            fontName=bold,
            fontSize=config.title_font_size,
            leading=config.title_font_size * 1.25,
            alignment=TA_CENTER,
            spaceAfter=6 * mm,
        ),
        "heading": ParagraphStyle(
            "KahootHeading",
            parent=base,
            fontName=bold,
            fontSize=config.heading_font_size,
            leading=config.heading_font_size * 1.25,
            spaceBefore=5 * mm,
            spaceAfter=2 * mm,
        ),
        "body": ParagraphStyle(
            "KahootBody",
            parent=base,
            fontName=regular,
            fontSize=config.body_font_size,
            leading=config.body_font_size * 1.3,
            spaceAfter=2 * mm,
        ),
    }


def _build_story(
    collection: QuestionCollection,
    texts: TextBundle,
    styles: dict,
    config: RenderConfig,
) -> List[Flowable]:
    title = f"{texts.get('title_label')} {collection.title}".strip()
    story: List[Flowable] = [Paragraph(escape(title), styles["title"])]

    for number, question in enumerate(collection, start=1):
        story.append(Paragraph(escape(texts.get("question_heading", number=number)), styles["heading"]))
        story.extend(_question_flowables(number, question, texts, styles))
        if config.show_percentages:
            line = texts.get("percentage_correct", percentage=question.percentage_correct)
            story.append(Paragraph(escape(line), styles["body"]))

    return story


def _question_flowables(
    number: int,
    question: Question,
    texts: TextBundle,
    styles: dict,
) -> List[Flowable]:
    if question.kind is QuestionKind.TRUE_OR_FALSE:
        return _true_false_flowables(question, texts, styles)
    if question.kind in (QuestionKind.SINGLE_CHOICE, QuestionKind.MULTIPLE_CHOICE):
        return _choice_flowables(question, texts, styles)
    raise RenderError(f"Unknown question kind {question.kind!r} for question {number}.")


def _true_false_flowables(
    question: TrueFalseQuestion,
    texts: TextBundle,
    styles: dict,
) -> List[Flowable]:
    word = texts.get("statement_right" if question.is_statement_true else "statement_wrong")
    verdict = f"{escape(texts.get('statement_is'))}<b><i>{escape(word)}</i></b>."
    return [
        Paragraph(escape(texts.get("true_false_prompt")), styles["body"]),
        Paragraph(f'<i>"{escape(question.statement_text)}"</i>', styles["body"]),
        Paragraph(verdict, styles["body"]),
    ]


def _choice_flowables(
    question: ChoiceQuestion,
    texts: TextBundle,
    styles: dict,
) -> List[Flowable]:
    rows = [
        [
            Paragraph(escape(option.text), styles["body"]),
            Paragraph(
                escape(texts.get("answer_right" if option.is_correct else "answer_wrong")),
                styles["body"],
            ),
        ]
        for option in question.options
    ]
    available = A4[0] - 2 * PAGE_MARGIN
    table = Table(rows, colWidths=[available * 0.75, available * 0.25])
    table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]))
    return [
        Paragraph(escape(question.prompt_text), styles["body"]),
        table,
        Spacer(1, 2 * mm),
    ]


def _numbered_canvas_class(font: str, page_label: str, page_of: str, topline: Optional[str]):
    """
    Build a canvas class that draws footer/topline after layout.

    Pages are buffered in showPage() and emitted in save(), when the page
    count is known.
    """

    class NumberedCanvas(canvas.Canvas):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._saved_page_states: List[dict] = []

        def showPage(self):
            self._saved_page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self):
            page_count = len(self._saved_page_states)
            for state in self._saved_page_states:
                self.__dict__.update(state)
                self._draw_decorations(page_count)
                super().showPage()
            super().save()

        def _draw_decorations(self, page_count: int) -> None:
            width, height = self._pagesize
            self.saveState()
            self.setFont(font, FOOTER_FONT_SIZE)
            footer = f"{page_label}{self._pageNumber}{page_of}{page_count}"
            self.drawCentredString(width / 2, FOOTER_Y, footer)
            if topline:
                self.drawCentredString(width / 2, height - HEADER_OFFSET, topline)
            self.restoreState()

    return NumberedCanvas
