"""Path and filename utilities.

Provides the target file naming rules (spreadsheet suffix replaced by the
document suffix, optional relocation into an output folder) and discovery
of Kahoot result spreadsheets in a folder.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from kahoot_toolkit.core.errors import ConversionError

SPREADSHEET_SUFFIX = ".xlsx"
DOCUMENT_SUFFIX = ".docx"


def change_suffix(
    filename: str | Path,
    new_suffix: str = DOCUMENT_SUFFIX,
    expected_suffix: str = SPREADSHEET_SUFFIX,
) -> str:
    """Replace the spreadsheet suffix of a filename with a document suffix.

    The expected suffix is matched case-insensitively and only the last
    suffix is replaced; directory and base name are kept as given.

    Args:
        filename: Filename, optionally with path.
        new_suffix: Suffix to put in place, e.g. ".docx".
        expected_suffix: Suffix the filename must end with.

    Returns:
        Filename with the new suffix.

    Raises:
        ConversionError: Filename does not end with expected_suffix.

    Examples:
        >>> change_suffix("path/to/input.XLSX")
        'path/to/input.docx'
        >>> change_suffix("input.old.xlsx")
        'input.old.docx'
        >>> change_suffix("input.xlsx", ".pdf")
        'input.pdf'
    """
    name = str(filename)
    if not name.lower().endswith(expected_suffix.lower()):
        raise ConversionError(
            f'Filename "{name}" did not have suffix "{expected_suffix.lstrip(".")}".'
        )
    return name[: -len(expected_suffix)] + new_suffix


def change_output_folder(filename: str | Path, output_folder: str | Path) -> str:
    """Relocate a file into another folder, keeping only its base name.

    Args:
        filename: Filename, relative or absolute.
        output_folder: Target folder, with or without trailing separator.

    Returns:
        output_folder joined with the base name of filename.

    Examples:
        >>> change_output_folder("/old/path/result.docx", "/path/to/results")
        '/path/to/results/result.docx'
        >>> change_output_folder("result.docx", "/path/to/results/")
        '/path/to/results/result.docx'
    """
    base_name = os.path.basename(str(filename))
    return os.path.join(str(output_folder), base_name)


def is_result_spreadsheet(filename: str | Path) -> bool:
    """Check for the spreadsheet suffix (case-insensitive).

    Examples:
        >>> is_result_spreadsheet("input.XLSX")
        True
        >>> is_result_spreadsheet("input.xls")
        False
    """
    return str(filename).lower().endswith(SPREADSHEET_SUFFIX)


def find_result_spreadsheets(folder: str | Path) -> List[Path]:
    """Find all result spreadsheets directly inside a folder.

    Args:
        folder: Folder to scan (not recursive).

    Returns:
        Sorted list of spreadsheet paths; may be empty.

    Raises:
        ConversionError: Folder does not exist or is not a folder.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise ConversionError(f'Folder "{folder}" not found or is not a folder.')
    return sorted(
        path for path in folder.iterdir()
        if path.is_file() and is_result_spreadsheet(path.name)
    )
