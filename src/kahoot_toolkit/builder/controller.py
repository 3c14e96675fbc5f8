"""
Module: builder.controller

Purpose:
    Orchestrate the complete conversion pipeline.
    Load workbook → Extract questions → Render → Write

Key Functions:
    - convert_file(): Convert one result spreadsheet
    - convert_folder(): Convert every result spreadsheet in a folder
    - target_path_for(): Output path for a source spreadsheet

Key Classes:
    - ConversionResult: Result of one conversion
    - BatchResult: Results and failures of a folder conversion

Dependencies:
    - extractor: Question extraction
    - builder.output: DOCX and PDF rendering
    - common.path_utils: Target naming and spreadsheet discovery

Used By:
    - kahoot_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from kahoot_toolkit.common.path_utils import (
    change_output_folder,
    change_suffix,
    find_result_spreadsheets,
)
from kahoot_toolkit.core.errors import ConversionError
from kahoot_toolkit.extractor import extract_result_file

from .config import RenderConfig
from .output import render_document, render_pdf, write_document

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionResult:
    """
    Result of converting one spreadsheet (immutable).

    Attributes:
        source_path: Spreadsheet that was read
        target_path: Document that was written
        question_count: Number of questions in the document
        title: Game title from the spreadsheet
    """
    source_path: Path
    target_path: Path
    question_count: int
    title: str


@dataclass
class BatchResult:
    """
    Results of a folder conversion.

    Attributes:
        results: Successful conversions, in processing order
        failures: (source path, error) pairs of failed conversions
    """
    results: List[ConversionResult] = field(default_factory=list)
    failures: List[Tuple[Path, ConversionError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def target_path_for(
    source: PathLike,
    output_dir: Optional[PathLike] = None,
    suffix: str = ".docx",
) -> Path:
    """
    Output path for a source spreadsheet.

    The ".xlsx" suffix is replaced by `suffix`; with output_dir set the
    file is placed there under its base name, otherwise beside the source.

    Example:
        >>> target_path_for("in/quiz.xlsx", "out")
        PosixPath('out/quiz.docx')
    """
    target = change_suffix(source, suffix)
    if output_dir is not None:
        target = change_output_folder(target, output_dir)
    return Path(target)


def convert_file(
    source: PathLike,
    config: RenderConfig,
    output_dir: Optional[PathLike] = None,
) -> ConversionResult:
    """
    Convert one Kahoot result spreadsheet into a document.

    Pipeline:
    1. Determine the target path (fails before reading on a bad suffix)
    2. Extract questions from the workbook
    3. Render in config.output_format
    4. Write the document

    Args:
        source: Path of the .xlsx file
        config: Render configuration
        output_dir: Folder for the document (default: beside the source)

    Returns:
        ConversionResult with paths and question count

    Raises:
        ConversionError: Any extraction, rendering or I/O failure
    """
    start_time = time.perf_counter()
    source = Path(source)
    target = target_path_for(source, output_dir, config.output_suffix)

    logger.info(f"Converting {source} -> {target}")

    collection = extract_result_file(source)

    if config.output_format == "pdf":
        render_pdf(collection, config, target)
    else:
        write_document(render_document(collection, config), target)

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Wrote {collection.question_count()} questions to {target} ({elapsed:.2f}s)"
    )
    return ConversionResult(
        source_path=source,
        target_path=target,
        question_count=collection.question_count(),
        title=collection.title,
    )


def convert_folder(
    folder: PathLike,
    config: RenderConfig,
    output_dir: Optional[PathLike] = None,
    continue_on_error: bool = False,
) -> BatchResult:
    """
    Convert all result spreadsheets in a folder, in sorted order.

    By default the first failing file aborts the batch and its error
    propagates. With continue_on_error the failure is logged and recorded
    and the remaining files are still converted.

    Args:
        folder: Folder to scan (not recursive)
        config: Render configuration
        output_dir: Folder for the documents (default: beside each source)
        continue_on_error: Keep going after a failing file

    Returns:
        BatchResult with successes and (only with continue_on_error) failures

    Raises:
        ConversionError: Folder missing, or a file failed without continue_on_error
    """
    start_time = time.perf_counter()
    sources = find_result_spreadsheets(folder)
    logger.info(f"Found {len(sources)} result spreadsheets in {folder}")

    batch = BatchResult()
    for source in sources:
        try:
            batch.results.append(convert_file(source, config, output_dir))
        except ConversionError as e:
            if not continue_on_error:
                raise
            logger.error(f"Failed to convert {source}: {e}")
            batch.failures.append((source, e))

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Converted {len(batch.results)} of {len(sources)} files ({elapsed:.2f}s)"
    )
    return batch
