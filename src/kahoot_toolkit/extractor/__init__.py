"""
Module: extractor

Purpose:
    Extraction of quiz questions from Kahoot result workbooks. Reads
    fixed-position cells of each question sheet, classifies every question
    as single-choice, multiple-choice or true/false, and validates the
    answer area.

Key Functions:
    - extract_questions(): Extract from any GridSource
    - extract_result_file(): Extract from an .xlsx path
    - load_workbook_grid(): Open an .xlsx file as GridSource

Key Classes:
    - GridSource / Sheet / Cell: Grid abstraction
    - ListGrid / ListSheet: In-memory grids

Dependencies:
    - openpyxl: XLSX reading
    - kahoot_toolkit.core.models: Question records

Used By:
    - kahoot_toolkit.builder.controller
"""

from .grid import Cell, CellKind, GridSource, ListGrid, ListSheet, Sheet
from .markers import count_correct, decode_marker, is_true_false_shape
from .pipeline import extract_questions, extract_result_file
from .workbook import WorkbookGrid, load_workbook_grid

__all__ = [
    # Grid
    "Cell",
    "CellKind",
    "GridSource",
    "ListGrid",
    "ListSheet",
    "Sheet",
    "WorkbookGrid",
    "load_workbook_grid",
    # Rules
    "count_correct",
    "decode_marker",
    "is_true_false_shape",
    # Pipeline
    "extract_questions",
    "extract_result_file",
]
