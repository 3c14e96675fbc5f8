import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import kahoot_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

import openpyxl

from kahoot_toolkit.extractor import ListGrid, ListSheet

CHECK = "✔"
CROSS = "✘"

LEADING_SHEET_NAMES = ("Overview", "Final Scores", "Kahoot! Summary")
TRAILING_SHEET_NAME = "RawReportData Data"

# (question text, option texts, markers, fraction correct)
RESULT_1_QUESTIONS = [
    (
        "What is the capital of France?",
        ["Paris", "London", "Rome", "Madrid"],
        [CHECK, CROSS, CROSS, CROSS],
        0.75,
    ),
    (
        "Which of these are prime numbers?",
        ["2", "3", "4", "6"],
        [CHECK, CHECK, CROSS, CROSS],
        0.5,
    ),
    (
        "Beijing is the capital of China.",
        ["True", "False"],
        [CHECK, CROSS],
        1.0,
    ),
]
RESULT_1_TITLE = "Test Questions for XLSX2Word (1)"

RESULT_2_QUESTIONS = [
    (
        "Is water wet?",
        ["Yes", "No"],
        [CHECK, CROSS],
        0.9,
    ),
    (
        "Which of these are mammals?",
        ["Whale", "Shark", "Bat"],
        [CHECK, CROSS, CHECK],
        0.25,
    ),
    (
        "Which planet is closest to the sun?",
        ["Venus", "Mercury", "Mars"],
        [CROSS, CHECK, CROSS],
        0.0,
    ),
]
RESULT_2_TITLE = "Test Questions for XLSX2Word (2)"


def question_rows(title, text, options, markers, fraction):
    """Nested rows of one question sheet in the Kahoot export layout."""
    rows = [[None] * 10 for _ in range(9)]
    rows[0][0] = title
    rows[1][1] = text
    rows[3][2] = fraction
    for index, option in enumerate(options):
        rows[7][3 + 2 * index] = option
    for index, marker in enumerate(markers):
        rows[8][2 + 2 * index] = marker
    return rows


def build_grid(title, questions):
    """ListGrid with 3 leading sheets, one sheet per question, 1 trailing sheet."""
    sheets = [ListSheet([[title]], name) for name in LEADING_SHEET_NAMES]
    for number, question in enumerate(questions, start=1):
        sheets.append(ListSheet(question_rows(title, *question), f"{number} Quiz"))
    sheets.append(ListSheet([["raw"]], TRAILING_SHEET_NAME))
    return ListGrid(sheets)


def write_result_workbook(path, title, questions):
    """Write a Kahoot-layout workbook with openpyxl."""
    workbook = openpyxl.Workbook()
    sheet_rows = [[[title]] for _ in LEADING_SHEET_NAMES]
    names = list(LEADING_SHEET_NAMES)
    for number, question in enumerate(questions, start=1):
        sheet_rows.append(question_rows(title, *question))
        names.append(f"{number} Quiz")
    sheet_rows.append([["raw"]])
    names.append(TRAILING_SHEET_NAME)

    workbook.active.title = names[0]
    for name in names[1:]:
        workbook.create_sheet(name)
    for worksheet, rows in zip(workbook.worksheets, sheet_rows):
        for row_index, row in enumerate(rows, start=1):
            for col_index, value in enumerate(row, start=1):
                if value is not None:
                    worksheet.cell(row=row_index, column=col_index, value=value)
    workbook.save(path)
    return Path(path)


# Common test fixtures
@pytest.fixture
def make_grid():
    """Factory: (title, questions) -> ListGrid."""
    return build_grid


@pytest.fixture
def make_workbook(tmp_path: Path):
    """Factory: (filename, title, questions) -> path of written .xlsx."""
    def factory(filename, title=RESULT_1_TITLE, questions=RESULT_1_QUESTIONS):
        return write_result_workbook(tmp_path / filename, title, questions)
    return factory


@pytest.fixture
def result_1_grid():
    """Single choice, multiple choice and a true/false question."""
    return build_grid(RESULT_1_TITLE, RESULT_1_QUESTIONS)


@pytest.fixture
def result_2_grid():
    """Choice questions with 2, 3 and 3 answer options."""
    return build_grid(RESULT_2_TITLE, RESULT_2_QUESTIONS)


@pytest.fixture
def result_1_xlsx(tmp_path: Path):
    return write_result_workbook(tmp_path / "input_result_1.xlsx", RESULT_1_TITLE, RESULT_1_QUESTIONS)


@pytest.fixture
def result_2_xlsx(tmp_path: Path):
    return write_result_workbook(tmp_path / "input_result_2.xlsx", RESULT_2_TITLE, RESULT_2_QUESTIONS)
