"""
Module: core.errors

Purpose:
    Single error taxonomy for the converter. Every failure raised by the
    extractor, the models, the renderers or the path helpers derives from
    ConversionError, so callers (the CLI) can catch one type and report
    its message. Subclasses only refine the kind of failure.

Key Classes:
    - ConversionError: Root of the taxonomy (file not found, I/O, suffix errors)
    - StructuralError: Workbook layout or cell content not as expected
    - InvalidQuestionError: Question model invariant violated
    - QuestionIndexError: Collection index out of range
    - TypeMismatchError: Typed collection accessor used on wrong kind
    - RenderError: Internal rendering failure (unknown question kind)

Used By:
    - core.models, extractor, builder, common.path_utils, cli
"""

from __future__ import annotations


class ConversionError(Exception):
    """Error while converting a Kahoot result file."""
    pass


class StructuralError(ConversionError):
    """Sheet does not follow the Kahoot export layout."""
    pass


class InvalidQuestionError(ConversionError, ValueError):
    """Question record would violate one of its invariants."""
    pass


class QuestionIndexError(ConversionError, IndexError):
    """Question index outside the collection."""
    pass


class TypeMismatchError(ConversionError, TypeError):
    """Question requested through an accessor for another kind."""
    pass


class RenderError(ConversionError):
    """Document could not be rendered."""
    pass
