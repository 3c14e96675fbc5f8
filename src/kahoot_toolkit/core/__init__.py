"""
Kahoot Toolkit Core Package

Shared data models and the error taxonomy. The extractor and the
renderers never talk to each other directly; they only share these types.
"""

from .errors import (
    ConversionError,
    InvalidQuestionError,
    QuestionIndexError,
    RenderError,
    StructuralError,
    TypeMismatchError,
)
from .models import (
    AnswerOption,
    ChoiceQuestion,
    QuestionCollection,
    QuestionKind,
    TrueFalseQuestion,
)

__all__ = [
    "ConversionError",
    "InvalidQuestionError",
    "QuestionIndexError",
    "RenderError",
    "StructuralError",
    "TypeMismatchError",
    "AnswerOption",
    "ChoiceQuestion",
    "QuestionCollection",
    "QuestionKind",
    "TrueFalseQuestion",
]
