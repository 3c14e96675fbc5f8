"""
Module: extractor.pipeline

Purpose:
    Main extraction entry point. Walks the question sheets of a Kahoot
    result grid, determines the shape of every question and assembles a
    validated QuestionCollection.

Key Functions:
    - extract_questions(): GridSource -> QuestionCollection
    - extract_result_file(): Path to .xlsx -> QuestionCollection
    - read_answer_options(): Option texts of one sheet (arity 2-4)

Dependencies:
    - extractor.grid: Sheet/GridSource abstraction
    - extractor.layout: Cell coordinates
    - extractor.markers: Marker decoding and shape rules
    - extractor.workbook: openpyxl loading
    - core.models: Question records

Used By:
    - builder.controller: File conversion
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from kahoot_toolkit.core.errors import InvalidQuestionError, StructuralError
from kahoot_toolkit.core.models import (
    ChoiceQuestion,
    Question,
    QuestionCollection,
    QuestionKind,
    TrueFalseQuestion,
)

from .grid import GridSource, Sheet, require_text
from .layout import (
    ANSWER_MARKER_CELLS,
    ANSWER_OPTION_CELLS,
    LEADING_NON_QUESTION_SHEETS,
    MAX_ANSWER_OPTIONS,
    MIN_ANSWER_OPTIONS,
    PERCENT_CORRECT_CELL,
    QUESTION_TEXT_CELL,
    TITLE_CELL,
    TITLE_SHEET_INDEX,
    TRAILING_NON_QUESTION_SHEETS,
    cell_name,
)
from .markers import count_correct, decode_marker, is_true_false_shape
from .workbook import load_workbook_grid

logger = logging.getLogger(__name__)

NON_QUESTION_SHEETS = LEADING_NON_QUESTION_SHEETS + TRAILING_NON_QUESTION_SHEETS


def extract_questions(grid: GridSource) -> QuestionCollection:
    """
    Extract all questions from a Kahoot result grid.

    Pipeline:
    1. Derive question count (sheets minus 3 leading and 1 trailing)
    2. For each question sheet, in order:
       a. Read question text, answer options and percentage
       b. Classify as true/false or choice question
       c. Decode correctness markers and build the record
    3. Read the game title from the first sheet

    Args:
        grid: Loaded workbook

    Returns:
        QuestionCollection in sheet order

    Raises:
        StructuralError: Too few sheets, or any question sheet does not
            follow the expected layout (message names the sheet)

    Example:
        >>> with load_workbook_grid(Path("input_result_1.xlsx")) as grid:
        ...     collection = extract_questions(grid)
        >>> collection.question_count()
        3
    """
    sheet_count = grid.sheet_count()
    question_count = sheet_count - NON_QUESTION_SHEETS
    if question_count < 1:
        raise StructuralError("Less than 1 sheet with questions.")

    logger.info(f"Number of sheets with questions: {question_count}")

    collection = QuestionCollection(size_hint=question_count)

    for question_no in range(1, question_count + 1):
        sheet_index = LEADING_NON_QUESTION_SHEETS - 1 + question_no
        sheet = grid.sheet(sheet_index)
        try:
            question = extract_question(sheet)
        except (StructuralError, InvalidQuestionError) as e:
            raise StructuralError(
                f'Sheet {sheet_index} ("{sheet.name}"), question {question_no}: {e}'
            ) from e

        logger.info(f"Found question on sheet with index={sheet_index}: {question}")
        collection.add(question)

    collection.title = extract_title(grid.sheet(TITLE_SHEET_INDEX))
    return collection


def extract_result_file(path: Union[str, Path]) -> QuestionCollection:
    """
    Load a Kahoot result .xlsx file and extract its questions.

    The workbook is closed before returning, also on errors.

    Raises:
        ConversionError: File missing or unreadable
        StructuralError: Workbook layout not as expected
    """
    with load_workbook_grid(path) as grid:
        return extract_questions(grid)


def extract_title(sheet: Sheet) -> str:
    """Title of the game in cell A1, stripped."""
    where = f"title cell {cell_name(TITLE_CELL)}"
    cell = sheet.cell(*TITLE_CELL)
    if cell.is_blank:
        return ""
    return cell.text(where).strip()


def extract_question(sheet: Sheet) -> Question:
    """
    Extract one question from a question sheet, including its shape.

    Returns:
        TrueFalseQuestion or ChoiceQuestion with percentage attached

    Raises:
        StructuralError: Missing cells, bad markers, bad option counts
    """
    question_text = require_text(sheet, QUESTION_TEXT_CELL, "question text")
    options = read_answer_options(sheet)
    percentage = read_percentage_correct(sheet)

    if is_true_false_shape(options):
        is_true = _decode_true_false(sheet, options)
        return TrueFalseQuestion(question_text, is_true, percentage)

    flags = read_correct_flags(sheet, len(options))
    num_correct = count_correct(flags)
    kind = QuestionKind.SINGLE_CHOICE if num_correct == 1 else QuestionKind.MULTIPLE_CHOICE

    question = ChoiceQuestion(kind, question_text, percentage)
    for text, is_correct in zip(options, flags):
        question.add_option(text, is_correct)
    return question


def read_answer_options(sheet: Sheet) -> List[str]:
    """
    Read answer option texts left to right, stopping at the first blank.

    Returns:
        2 to 4 stripped option texts

    Raises:
        StructuralError: Fewer than two options or non-text option cell
    """
    options: List[str] = []
    for ref in ANSWER_OPTION_CELLS:
        cell = sheet.cell(*ref)
        if cell.is_blank:
            break
        options.append(cell.text(f"answer option cell {cell_name(ref)}").strip())

    if not (MIN_ANSWER_OPTIONS <= len(options) <= MAX_ANSWER_OPTIONS):
        raise StructuralError(
            f"Expected {MIN_ANSWER_OPTIONS} to {MAX_ANSWER_OPTIONS} answer options, "
            f"found {len(options)}."
        )
    return options


def read_correct_flags(sheet: Sheet, arity: int) -> List[bool]:
    """
    Decode the first `arity` correctness markers.

    Raises:
        StructuralError: Marker cell empty, not text, or unknown glyph
    """
    flags: List[bool] = []
    for number, ref in enumerate(ANSWER_MARKER_CELLS[:arity], start=1):
        where = f"marker for answer option {number} ({cell_name(ref)})"
        cell = sheet.cell(*ref)
        if cell.is_blank:
            raise StructuralError(f"Cell with {where} is empty.")
        try:
            flags.append(decode_marker(cell.text(where)))
        except StructuralError as e:
            raise StructuralError(f"Cell with {where}: {e}") from e
    return flags


def read_percentage_correct(sheet: Sheet) -> float:
    """
    Percentage of players who answered correctly (C4 holds a fraction).

    Raises:
        StructuralError: Cell empty or not numeric
    """
    where = f"percentage cell {cell_name(PERCENT_CORRECT_CELL)}"
    cell = sheet.cell(*PERCENT_CORRECT_CELL)
    if cell.is_blank:
        raise StructuralError(f"Cell with {where} is empty.")
    # 100% is stored as 1.0
    return cell.number(where) * 100.0


def _decode_true_false(sheet: Sheet, options: List[str]) -> bool:
    """
    Decide whether the statement of a true/false question is right.

    Both markers are decoded and must disagree; the option text above the
    "correct" marker then says whether the statement is true.
    """
    first, second = read_correct_flags(sheet, 2)
    if first == second:
        raise StructuralError(
            "Could not determine for true/false question if correct option is first or second one."
        )
    correct_text = options[0] if first else options[1]
    return correct_text.lower() == "true"
