"""
Module: extractor.grid

Purpose:
    Abstract access to a workbook as a sequence of sheets of typed cells.
    The extractor only sees this interface, so it can run on an openpyxl
    workbook (extractor.workbook) or on plain Python lists (tests).

Key Classes:
    - CellKind: EMPTY / STRING / NUMERIC
    - Cell: Typed cell value with checked accessors
    - Sheet: Abstract sheet (cell lookup by 0-based row/column)
    - GridSource: Abstract sequence of sheets
    - ListSheet / ListGrid: In-memory implementations

Dependencies:
    - extractor.layout: CellRef, cell_name
    - core.errors: StructuralError

Used By:
    - extractor.pipeline
    - extractor.workbook
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from kahoot_toolkit.core.errors import StructuralError

from .layout import CellRef, cell_name


class CellKind(str, Enum):
    """Type of cell content."""
    EMPTY = "empty"
    STRING = "string"
    NUMERIC = "numeric"


@dataclass(frozen=True, slots=True)
class Cell:
    """
    Typed cell (immutable).

    Attributes:
        kind: Content type
        value: str for STRING, float for NUMERIC, None for EMPTY
    """

    kind: CellKind
    value: Union[str, float, None] = None

    @classmethod
    def empty(cls) -> Cell:
        return cls(CellKind.EMPTY)

    @classmethod
    def from_value(cls, value: Any) -> Cell:
        """
        Classify a raw Python value.

        None is EMPTY, int/float (not bool) is NUMERIC, bool becomes the
        string "TRUE"/"FALSE", anything else is its str() form.
        """
        if value is None:
            return cls.empty()
        if isinstance(value, bool):
            return cls(CellKind.STRING, "TRUE" if value else "FALSE")
        if isinstance(value, (int, float)):
            return cls(CellKind.NUMERIC, float(value))
        return cls(CellKind.STRING, str(value))

    @property
    def is_blank(self) -> bool:
        """True for EMPTY cells and whitespace-only strings."""
        if self.kind is CellKind.EMPTY:
            return True
        return self.kind is CellKind.STRING and not self.value.strip()

    def text(self, where: str = "cell") -> str:
        """
        Get string content.

        Raises:
            StructuralError: Cell is not a string cell
        """
        if self.kind is not CellKind.STRING:
            raise StructuralError(f"Expected text in {where}, found {self.kind.value} cell.")
        return self.value

    def number(self, where: str = "cell") -> float:
        """
        Get numeric content.

        Raises:
            StructuralError: Cell is not a numeric cell
        """
        if self.kind is not CellKind.NUMERIC:
            raise StructuralError(f"Expected number in {where}, found {self.kind.value} cell.")
        return self.value


class Sheet(ABC):
    """
    Abstract sheet of a workbook.

    Cell coordinates are 0-based. Cells outside the used range are EMPTY.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Sheet title."""

    @abstractmethod
    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at 0-based (row, col).

        Returns:
            Cell; EMPTY when the position holds nothing
        """


class GridSource(ABC):
    """Abstract, indexed sequence of sheets."""

    @abstractmethod
    def sheet_count(self) -> int:
        """Number of sheets."""

    @abstractmethod
    def sheet(self, index: int) -> Sheet:
        """
        Get sheet at 0-based index.

        Raises:
            StructuralError: index outside [0, sheet_count())
        """


class ListSheet(Sheet):
    """
    Sheet backed by nested lists of raw values.

    Example:
        >>> sheet = ListSheet([["Title"], [None, "Question?"]])
        >>> sheet.cell(1, 1).text()
        'Question?'
    """

    def __init__(self, rows: Sequence[Sequence[Any]], name: str = "") -> None:
        self._rows = [list(row) for row in rows]
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def cell(self, row: int, col: int) -> Cell:
        if row < 0 or col < 0 or row >= len(self._rows):
            return Cell.empty()
        values = self._rows[row]
        if col >= len(values):
            return Cell.empty()
        return Cell.from_value(values[col])


class ListGrid(GridSource):
    """Grid backed by a list of ListSheet objects."""

    def __init__(self, sheets: Sequence[Sheet]) -> None:
        self._sheets = list(sheets)

    def sheet_count(self) -> int:
        return len(self._sheets)

    def sheet(self, index: int) -> Sheet:
        if index < 0 or index >= len(self._sheets):
            raise StructuralError(f"No sheet with index {index}.")
        return self._sheets[index]


def require_text(sheet: Sheet, ref: CellRef, label: Optional[str] = None) -> str:
    """
    Read a non-blank string cell, stripped.

    Raises:
        StructuralError: Cell is empty or not a string
    """
    where = f"{label or 'cell'} {cell_name(ref)}"
    cell = sheet.cell(*ref)
    if cell.is_blank:
        raise StructuralError(f"Cell with {where} is empty.")
    return cell.text(where).strip()
