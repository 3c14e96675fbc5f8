"""
Module: builder.config

Purpose:
    Configuration dataclass for document rendering. Immutable
    configuration with validation on construction; passed explicitly to
    the renderers instead of process-wide language state.

Key Classes:
    - RenderConfig: Language, topline, fonts and output format

Dependencies:
    - dataclasses (std)

Used By:
    - builder.controller: Conversion pipeline
    - builder.output: DOCX and PDF renderers
    - cli: Built from command line arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

OUTPUT_FORMATS = ("docx", "pdf")


def _default_creator() -> str:
    from kahoot_toolkit import __version__
    return f"kahoot_toolkit {__version__}"


@dataclass(frozen=True)
class RenderConfig:
    """
    Configuration for rendering a question collection (immutable).

    Attributes:
        language: Language code of the fixed document texts ("en", "de")
        topline: Optional header line repeated on every page
        show_percentages: Add "x% of players gave the correct answer" lines
        title_font_size: Title size in points
        heading_font_size: "Question No n" size in points
        body_font_size: Body text size in points
        creator: Creator stamped into document metadata
        output_format: "docx" or "pdf"
        pdf_font_path: TrueType font for PDF text (default: built-in
            Helvetica, which covers Latin-1 only)

    Example:
        >>> config = RenderConfig(language="de", topline="Class 7b")
        >>> config.output_suffix
        '.docx'
    """

    language: str = "en"
    topline: Optional[str] = None
    show_percentages: bool = False

    # Fonts (points)
    title_font_size: int = 18
    heading_font_size: int = 13
    body_font_size: int = 11

    # Metadata
    creator: str = field(default_factory=_default_creator)

    # Output
    output_format: str = "docx"
    pdf_font_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.language or not self.language.strip():
            raise ValueError(f"language must not be empty: {self.language!r}")
        for name in ("title_font_size", "heading_font_size", "body_font_size"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive: {value}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}: {self.output_format!r}"
            )

    @property
    def output_suffix(self) -> str:
        return f".{self.output_format}"

    @property
    def has_topline(self) -> bool:
        return bool(self.topline and self.topline.strip())
