"""
Module: extractor.layout

Purpose:
    Fixed cell coordinates of the Kahoot result export. Every position the
    extractor reads is defined here, so a change of the export layout is a
    single edit. All indices are 0-based (row, column); the comments give
    the spreadsheet cell names.

    Workbook structure: sheets 0-2 are "Overview", "Final Scores" and
    "Kahoot! Summary", then one sheet per question, and the last sheet is
    "RawReportData Data".

Used By:
    - extractor.pipeline: Reads cells at these coordinates
    - extractor.markers: Marker glyphs and option limits
"""

from __future__ import annotations

from typing import Tuple

CellRef = Tuple[int, int]

# Sheets that never hold a question
LEADING_NON_QUESTION_SHEETS = 3
TRAILING_NON_QUESTION_SHEETS = 1
TITLE_SHEET_INDEX = 0

TITLE_CELL: CellRef = (0, 0)  # A1, repeated on every sheet but the last
QUESTION_TEXT_CELL: CellRef = (1, 1)  # B2
PERCENT_CORRECT_CELL: CellRef = (3, 2)  # C4, fraction (1.0 == 100%)

# Answer option texts: D8, F8, H8, J8
ANSWER_OPTION_CELLS: Tuple[CellRef, ...] = ((7, 3), (7, 5), (7, 7), (7, 9))

# Check/cross markers: C9, E9, G9, I9
ANSWER_MARKER_CELLS: Tuple[CellRef, ...] = ((8, 2), (8, 4), (8, 6), (8, 8))

MIN_ANSWER_OPTIONS = 2
MAX_ANSWER_OPTIONS = len(ANSWER_OPTION_CELLS)
MAX_CORRECT_OPTIONS = 3

MARKER_CORRECT = "✔"  # HEAVY CHECK MARK
MARKER_INCORRECT = "✘"  # HEAVY BALLOT X

TRUE_FALSE_OPTION_TEXTS = frozenset({"true", "false"})


def cell_name(ref: CellRef) -> str:
    """
    Spreadsheet name of a 0-based cell reference.

    Example:
        >>> cell_name((7, 3))
        'D8'
    """
    row, col = ref
    letters = ""
    col += 1
    while col:
        col, rem = divmod(col - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return f"{letters}{row + 1}"
