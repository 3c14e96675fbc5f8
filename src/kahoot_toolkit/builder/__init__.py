"""
Module: builder

Purpose:
    Document building pipeline. Renders an extracted QuestionCollection
    to a Word document (or PDF) with translated fixed texts, numbered
    questions, a page footer and an optional topline.

Key Functions:
    - convert_file(): Main entry point for one spreadsheet
    - convert_folder(): Convert every spreadsheet in a folder
    - load_texts(): Translated fixed texts for a language

Key Classes:
    - RenderConfig: Configuration for rendering
    - ConversionResult / BatchResult: Conversion results

Dependencies:
    - python-docx: DOCX generation
    - reportlab: PDF generation
    - kahoot_toolkit.extractor: Question extraction

Used By:
    - kahoot_toolkit.cli: Command line entry point
"""

from .config import OUTPUT_FORMATS, RenderConfig
from .texts import TextBundle, load_texts, resolve_language, supported_languages
from .controller import (
    BatchResult,
    ConversionResult,
    convert_file,
    convert_folder,
    target_path_for,
)

__all__ = [
    # Config
    "OUTPUT_FORMATS",
    "RenderConfig",
    # Texts
    "TextBundle",
    "load_texts",
    "resolve_language",
    "supported_languages",
    # Controller
    "BatchResult",
    "ConversionResult",
    "convert_file",
    "convert_folder",
    "target_path_for",
]
