"""
Unit tests for path and filename utilities.
"""

import os

import pytest

from kahoot_toolkit.common.path_utils import (
    change_output_folder,
    change_suffix,
    find_result_spreadsheets,
    is_result_spreadsheet,
)
from kahoot_toolkit.core.errors import ConversionError


class TestChangeSuffix:
    """Tests for change_suffix()."""

    @pytest.mark.parametrize("filename,expected", [
        ("input.xlsx", "input.docx"),
        ("path/to/input.XLSX", "path/to/input.docx"),
        ("input.old.xlsx", "input.old.docx"),
        ("/abs/x.xlsx/input.Xlsx", "/abs/x.xlsx/input.docx"),
    ])
    def test_change_when_spreadsheet_then_last_suffix_replaced(self, filename, expected):
        assert change_suffix(filename) == expected

    def test_change_when_other_target_suffix_then_used(self):
        assert change_suffix("input.xlsx", ".pdf") == "input.pdf"

    @pytest.mark.parametrize("filename", ["input.xls", "input.xlsx.bak", "xlsx"])
    def test_change_when_suffix_missing_then_raises_error(self, filename):
        with pytest.raises(ConversionError, match='did not have suffix "xlsx"'):
            change_suffix(filename)


class TestChangeOutputFolder:
    """Tests for change_output_folder()."""

    @pytest.mark.parametrize("folder", ["/path/to/results", "/path/to/results/"])
    def test_change_when_trailing_separator_or_not_then_same_result(self, folder):
        result = change_output_folder("/old/path/result.docx", folder)
        assert result == os.path.join("/path/to/results", "result.docx")

    def test_change_when_relative_filename_then_base_name_kept(self):
        assert change_output_folder("result.docx", "out") == os.path.join("out", "result.docx")


class TestSpreadsheetDiscovery:
    """Tests for is_result_spreadsheet() and find_result_spreadsheets()."""

    @pytest.mark.parametrize("name,expected", [
        ("quiz.xlsx", True),
        ("QUIZ.XLSX", True),
        ("quiz.xls", False),
        ("quiz.xlsx.docx", False),
    ])
    def test_is_spreadsheet_when_name_then_case_insensitive_suffix(self, name, expected):
        assert is_result_spreadsheet(name) is expected

    def test_find_when_mixed_folder_then_sorted_spreadsheets_only(self, tmp_path):
        for name in ("b.xlsx", "a.XLSX", "c.txt", "d.docx"):
            (tmp_path / name).write_bytes(b"")
        (tmp_path / "sub.xlsx").mkdir()

        found = find_result_spreadsheets(tmp_path)

        assert [path.name for path in found] == ["a.XLSX", "b.xlsx"]

    def test_find_when_folder_missing_then_raises_error(self, tmp_path):
        with pytest.raises(ConversionError, match="not found or is not a folder"):
            find_result_spreadsheets(tmp_path / "missing")

    def test_find_when_path_is_file_then_raises_error(self, tmp_path):
        path = tmp_path / "a.xlsx"
        path.write_bytes(b"")
        with pytest.raises(ConversionError):
            find_result_spreadsheets(path)
