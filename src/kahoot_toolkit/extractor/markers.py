"""
Module: extractor.markers

Purpose:
    Decoding rules for the answer area of a question sheet: check/cross
    marker glyphs, the number of correct options, and the true/false
    shape test.

Key Functions:
    - decode_marker(): Marker cell text -> is_correct
    - count_correct(): Count correct flags, rejecting 0 or more than 3
    - is_true_false_shape(): Two options that are exactly "true"/"false"

Dependencies:
    - extractor.layout: Marker glyphs and limits
    - core.errors: StructuralError

Used By:
    - extractor.pipeline
"""

from __future__ import annotations

from typing import Sequence

from kahoot_toolkit.core.errors import StructuralError

from .layout import (
    MARKER_CORRECT,
    MARKER_INCORRECT,
    MAX_CORRECT_OPTIONS,
    TRUE_FALSE_OPTION_TEXTS,
)

_MARKER_VALUES = {
    MARKER_CORRECT: True,
    MARKER_INCORRECT: False,
}


def char_to_unicode(ch: str) -> str:
    """
    Unicode code point notation for a character.

    Example:
        >>> char_to_unicode("✔")
        'U+2714'
    """
    return f"U+{ord(ch):04X}"


def decode_marker(text: str) -> bool:
    """
    Decode a correctness marker cell.

    Only the first non-space character is considered.

    Args:
        text: Marker cell content

    Returns:
        True for the check mark, False for the cross

    Raises:
        StructuralError: Empty text or unknown glyph
    """
    stripped = text.strip()
    if not stripped:
        raise StructuralError("Marker cell is empty.")
    glyph = stripped[0]
    try:
        return _MARKER_VALUES[glyph]
    except KeyError:
        raise StructuralError(
            f'Could not recognize symbol with unicode "{char_to_unicode(glyph)}".'
        ) from None


def count_correct(flags: Sequence[bool]) -> int:
    """
    Count correct answer options.

    Args:
        flags: One flag per populated answer option

    Returns:
        Number of True flags (1 to MAX_CORRECT_OPTIONS)

    Raises:
        StructuralError: No correct option, or more than MAX_CORRECT_OPTIONS

    Example:
        >>> count_correct([False, True, True, False])
        2
    """
    counter = sum(1 for flag in flags if flag)
    if counter == 0:
        raise StructuralError("No correct answer options found.")
    if counter > MAX_CORRECT_OPTIONS:
        raise StructuralError(
            f"More than {MAX_CORRECT_OPTIONS} correct answer options, namely {counter}."
        )
    return counter


def is_true_false_shape(option_texts: Sequence[str]) -> bool:
    """
    Check whether answer options are those of a true/false question.

    Exactly two options whose texts are "true" and "false" (any order,
    case-insensitive). A genuine two-option choice question with these
    texts is classified as true/false too; that mirrors the export.

    Example:
        >>> is_true_false_shape(["False", "True"])
        True
        >>> is_true_false_shape(["false", "true", "x"])
        False
    """
    if len(option_texts) != 2:
        return False
    lowered = {text.strip().lower() for text in option_texts}
    return lowered == TRUE_FALSE_OPTION_TEXTS
