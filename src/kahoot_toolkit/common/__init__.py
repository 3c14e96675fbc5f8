"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .path_utils import (
    change_output_folder,
    change_suffix,
    find_result_spreadsheets,
    is_result_spreadsheet,
)

__all__ = [
    "change_output_folder",
    "change_suffix",
    "find_result_spreadsheets",
    "is_result_spreadsheet",
]
