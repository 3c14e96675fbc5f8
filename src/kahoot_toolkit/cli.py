"""
Module: cli

Purpose:
    Command line entry point. Converts one Kahoot result spreadsheet
    (-f) or every spreadsheet in a folder (-i) into Word documents.

    Exit codes:
        0  success (also for --help)
        1  invalid or missing arguments
        2  error while processing
        3  output folder does not exist

Key Functions:
    - main(): Parse arguments, run the conversion, return exit code
    - build_parser(): argparse parser for the options

Dependencies:
    - argparse (std)
    - builder.controller: Conversion pipeline

Used By:
    - python -m kahoot_toolkit
    - kahoot2docx console script
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from kahoot_toolkit import __version__
from kahoot_toolkit.builder import (
    OUTPUT_FORMATS,
    RenderConfig,
    convert_file,
    convert_folder,
    resolve_language,
)
from kahoot_toolkit.builder.texts import DEFAULT_LANGUAGE
from kahoot_toolkit.core.errors import ConversionError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PROCESSING = 2
EXIT_NO_OUTPUT_FOLDER = 3


class UsageError(Exception):
    """Invalid or missing command line arguments."""
    pass


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises on usage errors instead of exiting with 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="kahoot2docx",
        description=(
            "Convert Kahoot result spreadsheets (.xlsx) into Word documents "
            "listing every question with its right and wrong answers."
        ),
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--infile", type=Path, metavar="FILE",
                        help="Kahoot result file (.xlsx) to convert")
    source.add_argument("-i", "--infolder", type=Path, metavar="FOLDER",
                        help="Convert every .xlsx file in this folder")
    parser.add_argument("-o", "--outfolder", type=Path, metavar="FOLDER",
                        help="Folder for the output files (default: beside the input)")
    parser.add_argument("-t", "--topline", metavar="TEXT",
                        help="Line printed at the top of every page")
    parser.add_argument("-l", "--locale", default=DEFAULT_LANGUAGE, metavar="CODE",
                        help="Language of the fixed texts, e.g. en or de (default: %(default)s)")
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS,
                        default="docx", help="Output format (default: %(default)s)")
    parser.add_argument("--pdf-font", metavar="TTF",
                        help="TrueType font for PDF output, needed for non-Latin scripts")
    parser.add_argument("--percentages", action="store_true",
                        help="Add the share of players who answered correctly")
    parser.add_argument("--continue-on-error", action="store_true",
                        help="In folder mode, keep converting after a failing file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    parser.add_argument("--traceback", action="store_true",
                        help="Print the full error chain on failure")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except SystemExit as e:
        # --help / --version
        return e.code if isinstance(e.code, int) else EXIT_OK

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.outfolder is not None and not args.outfolder.is_dir():
        print(f'Error: Output folder "{args.outfolder}" does not exist.', file=sys.stderr)
        return EXIT_NO_OUTPUT_FOLDER

    try:
        config = RenderConfig(
            language=resolve_language(args.locale),
            topline=args.topline,
            show_percentages=args.percentages,
            output_format=args.output_format,
            pdf_font_path=args.pdf_font,
        )
        if args.infile is not None:
            convert_file(args.infile, config, args.outfolder)
            return EXIT_OK

        batch = convert_folder(
            args.infolder,
            config,
            args.outfolder,
            continue_on_error=args.continue_on_error,
        )
        if not batch.ok:
            print(f"Error: {len(batch.failures)} file(s) could not be converted.", file=sys.stderr)
            return EXIT_PROCESSING
        return EXIT_OK
    except (ConversionError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.traceback:
            traceback.print_exception(type(e), e, e.__traceback__, file=sys.stderr)
        return EXIT_PROCESSING
