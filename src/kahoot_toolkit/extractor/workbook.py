"""
Module: extractor.workbook

Purpose:
    GridSource backed by an openpyxl workbook. Loads a Kahoot result
    .xlsx file with cached cell values (data_only) and exposes it through
    the Sheet/GridSource interface of extractor.grid.

Key Functions:
    - load_workbook_grid(): Open a result file as a WorkbookGrid

Key Classes:
    - WorkbookGrid: GridSource over an openpyxl Workbook (context manager)
    - WorksheetSheet: Sheet over an openpyxl Worksheet

Dependencies:
    - openpyxl: XLSX reading
    - extractor.grid: Cell, Sheet, GridSource

Used By:
    - extractor.pipeline.extract_result_file()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import openpyxl
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from kahoot_toolkit.core.errors import ConversionError, StructuralError

from .grid import Cell, GridSource, Sheet

logger = logging.getLogger(__name__)


class WorksheetSheet(Sheet):
    """Sheet over one openpyxl worksheet."""

    def __init__(self, worksheet: Worksheet) -> None:
        self._worksheet = worksheet

    @property
    def name(self) -> str:
        return self._worksheet.title

    def cell(self, row: int, col: int) -> Cell:
        if row < 0 or col < 0:
            return Cell.empty()
        # openpyxl cell coordinates are 1-based
        if row >= self._worksheet.max_row or col >= self._worksheet.max_column:
            return Cell.empty()
        return Cell.from_value(self._worksheet.cell(row=row + 1, column=col + 1).value)


class WorkbookGrid(GridSource):
    """
    GridSource over an openpyxl workbook.

    Use as a context manager so the workbook is closed on all paths.

    Example:
        >>> with load_workbook_grid(Path("result.xlsx")) as grid:
        ...     grid.sheet_count()
        8
    """

    def __init__(self, workbook: Workbook, source: Union[str, Path] = "") -> None:
        self._workbook = workbook
        self.source = str(source)

    def sheet_count(self) -> int:
        return len(self._workbook.worksheets)

    def sheet(self, index: int) -> Sheet:
        if index < 0 or index >= self.sheet_count():
            raise StructuralError(f"No sheet with index {index} in {self.source}.")
        return WorksheetSheet(self._workbook.worksheets[index])

    def close(self) -> None:
        self._workbook.close()

    def __enter__(self) -> WorkbookGrid:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_workbook_grid(path: Union[str, Path]) -> WorkbookGrid:
    """
    Load a Kahoot result workbook.

    Args:
        path: Path to .xlsx file

    Returns:
        WorkbookGrid; caller must close it (or use `with`)

    Raises:
        ConversionError: File not found, or openpyxl could not read it
    """
    path = Path(path)
    if not path.exists():
        raise ConversionError(f'Input file "{path}" not found.')

    try:
        workbook = openpyxl.load_workbook(filename=path, data_only=True)
    except Exception as exc:
        raise ConversionError(f'Error when trying to read input file "{path}".') from exc

    logger.debug(f"Loaded workbook {path} with {len(workbook.worksheets)} sheets")
    return WorkbookGrid(workbook, path)
