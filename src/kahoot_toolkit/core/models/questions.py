"""
Module: questions

Purpose:
    Provides the question records passed from the extractor to the
    renderers. A question is either a ChoiceQuestion (single- or
    multiple-choice, up to four answer slots) or a TrueFalseQuestion.
    The two form a tagged union dispatched on `kind`.

Key Classes:
    - QuestionKind: Closed set of question shapes
    - AnswerStatus: Slot state (RIGHT/WRONG/UNKNOWN)
    - AnswerOption: Immutable (text, is_correct) value
    - ChoiceQuestion: Append-only answer slots with invariants
    - TrueFalseQuestion: Statement plus truth value

Dependencies:
    - dataclasses (std)
    - enum (std)
    - core.errors: InvalidQuestionError

Used By:
    - core.models.collection.QuestionCollection
    - extractor.pipeline
    - builder.output renderers

Invariants:
    - A ChoiceQuestion never holds more than MAX_ANSWER_OPTIONS options
    - A SINGLE_CHOICE question never holds more than one correct option
    - Slot correctness is fixed once added; counts are computed from slots
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from kahoot_toolkit.core.errors import InvalidQuestionError

MAX_ANSWER_OPTIONS = 4


class QuestionKind(str, Enum):
    """Shape of a question."""
    SINGLE_CHOICE = "single_choice"
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_OR_FALSE = "true_or_false"

    def __str__(self) -> str:
        return self.value


class AnswerStatus(str, Enum):
    """State of one answer slot; UNKNOWN marks a slot that was never filled."""
    RIGHT = "right"
    WRONG = "wrong"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class AnswerOption:
    """
    One answer option of a choice question (immutable).

    Attributes:
        text: Answer option text as shown to players
        is_correct: Whether the export marked this option as correct

    Example:
        >>> AnswerOption("Paris", True).label
        'Right'
    """

    text: str
    is_correct: bool

    @property
    def label(self) -> str:
        """Untranslated Right/Wrong label (used in log output)."""
        return "Right" if self.is_correct else "Wrong"


def _check_percentage(value: float) -> float:
    value = float(value)
    if not (0.0 <= value <= 100.0):
        raise InvalidQuestionError(f"percentage_correct must be 0-100: {value}")
    return value


def _format_percentage(value: float) -> str:
    return f"{value:.1f}% of players gave the correct answer"


def _quoted_list(texts: Tuple[str, ...]) -> str:
    return ", ".join(f'"{text}"' for text in texts)


class ChoiceQuestion:
    """
    Single- or multiple-choice question with up to four answer slots.

    Slots are append-only: `add_option()` fills the next UNKNOWN slot and
    the correctness of a filled slot never changes. Counts are derived from
    the slots on every access, so they cannot drift.

    Attributes:
        kind: SINGLE_CHOICE or MULTIPLE_CHOICE
        prompt_text: Question text
        percentage_correct: Share of players answering correctly (0-100)

    Example:
        >>> q = ChoiceQuestion(QuestionKind.SINGLE_CHOICE, "Capital of France?")
        >>> q.add_option("Paris", True)
        >>> q.add_option("Rome", False)
        >>> q.num_answered, q.num_correct, q.num_wrong
        (2, 1, 1)
    """

    __slots__ = ("_kind", "prompt_text", "_percentage_correct", "_slots")

    def __init__(
        self,
        kind: QuestionKind,
        prompt_text: str,
        percentage_correct: float = 0.0,
    ) -> None:
        if kind not in (QuestionKind.SINGLE_CHOICE, QuestionKind.MULTIPLE_CHOICE):
            raise InvalidQuestionError(f"Illegal question type {kind}")
        self._kind = kind
        self.prompt_text = prompt_text
        self._percentage_correct = _check_percentage(percentage_correct)
        self._slots: List[Tuple[str, AnswerStatus]] = [
            ("", AnswerStatus.UNKNOWN) for _ in range(MAX_ANSWER_OPTIONS)
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # Identity
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def kind(self) -> QuestionKind:
        """Fixed at construction; slot invariants depend on it."""
        return self._kind

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add_option(self, text: str, is_correct: bool) -> None:
        """
        Append an answer option to the next free slot.

        Args:
            text: Answer option text
            is_correct: Whether the option is a correct answer

        Raises:
            InvalidQuestionError: All four slots are used, or a second
                correct option is added to a single-choice question.
                The question is left unchanged in both cases.
        """
        index = self.num_answered
        if index >= MAX_ANSWER_OPTIONS:
            raise InvalidQuestionError(
                f"Attempt to add more than {MAX_ANSWER_OPTIONS} answer options to question."
            )
        if is_correct and self.kind is QuestionKind.SINGLE_CHOICE and self.num_correct > 0:
            raise InvalidQuestionError(
                "Added more than one correct answer option for single-choice question."
            )
        status = AnswerStatus.RIGHT if is_correct else AnswerStatus.WRONG
        self._slots[index] = (text, status)

    @property
    def percentage_correct(self) -> float:
        return self._percentage_correct

    @percentage_correct.setter
    def percentage_correct(self, value: float) -> None:
        self._percentage_correct = _check_percentage(value)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def options(self) -> Tuple[AnswerOption, ...]:
        """Populated answer options in slot order; UNKNOWN slots are skipped."""
        return tuple(
            AnswerOption(text, status is AnswerStatus.RIGHT)
            for text, status in self._slots
            if status is not AnswerStatus.UNKNOWN
        )

    @property
    def num_answered(self) -> int:
        return sum(1 for _, status in self._slots if status is not AnswerStatus.UNKNOWN)

    @property
    def num_correct(self) -> int:
        return sum(1 for _, status in self._slots if status is AnswerStatus.RIGHT)

    @property
    def num_wrong(self) -> int:
        return sum(1 for _, status in self._slots if status is AnswerStatus.WRONG)

    @property
    def correct_texts(self) -> Tuple[str, ...]:
        return tuple(option.text for option in self.options if option.is_correct)

    @property
    def wrong_texts(self) -> Tuple[str, ...]:
        return tuple(option.text for option in self.options if not option.is_correct)

    def option_at(self, number: int) -> AnswerOption:
        """
        Get answer option by its 1-based number.

        Raises:
            InvalidQuestionError: number below 1 or above num_answered
        """
        if number < 1:
            raise InvalidQuestionError(
                f"Attempt to obtain answer option with too low number {number}."
            )
        if number > self.num_answered:
            raise InvalidQuestionError(
                f"Attempt to obtain answer option with too high number {number}."
            )
        return self.options[number - 1]

    def percentage_text(self) -> str:
        return _format_percentage(self._percentage_correct)

    def __repr__(self) -> str:
        return (
            f"ChoiceQuestion(kind={self.kind!s}, prompt_text={self.prompt_text!r}, "
            f"options={self.options!r})"
        )

    def __str__(self) -> str:
        name = "Single Choice" if self.kind is QuestionKind.SINGLE_CHOICE else "Multiple Choice"
        return (
            f'{name} question with question text "{self.prompt_text}"; '
            f"Right answers: {_quoted_list(self.correct_texts)}; "
            f"Wrong answers: {_quoted_list(self.wrong_texts)}"
        )


@dataclass(slots=True)
class TrueFalseQuestion:
    """
    True/false question: a statement the players judge as right or wrong.

    Attributes:
        statement_text: The statement shown to players
        is_statement_true: Whether the statement is right
        percentage_correct: Share of players answering correctly (0-100)

    Example:
        >>> q = TrueFalseQuestion("Beijing is the capital of China.", True)
        >>> q.kind
        <QuestionKind.TRUE_OR_FALSE: 'true_or_false'>
    """

    statement_text: str
    is_statement_true: bool
    percentage_correct: float = 0.0

    def __post_init__(self) -> None:
        self.percentage_correct = _check_percentage(self.percentage_correct)

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TRUE_OR_FALSE

    def percentage_text(self) -> str:
        return _format_percentage(self.percentage_correct)

    def __str__(self) -> str:
        return (
            f'True/false question, statement "{self.statement_text}", '
            f"isTrue={self.is_statement_true}. {self.percentage_text()}."
        )


Question = Union[ChoiceQuestion, TrueFalseQuestion]
