"""
Core Models Package

Question records and the collection that carries them from the extractor
to the renderers.

| Type | Role |
|------|------|
| `QuestionKind` | SINGLE_CHOICE / MULTIPLE_CHOICE / TRUE_OR_FALSE |
| `AnswerOption` | Immutable (text, is_correct) value |
| `ChoiceQuestion` | Append-only answer slots, at most one correct for single choice |
| `TrueFalseQuestion` | Statement plus truth value |
| `QuestionCollection` | Ordered records plus game title, typed accessors |
"""

from .questions import (
    AnswerOption,
    AnswerStatus,
    ChoiceQuestion,
    MAX_ANSWER_OPTIONS,
    Question,
    QuestionKind,
    TrueFalseQuestion,
)
from .collection import QuestionCollection

__all__ = [
    "AnswerOption",
    "AnswerStatus",
    "ChoiceQuestion",
    "MAX_ANSWER_OPTIONS",
    "Question",
    "QuestionKind",
    "TrueFalseQuestion",
    "QuestionCollection",
]
