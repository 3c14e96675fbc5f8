"""
Module: collection

Purpose:
    Provides QuestionCollection - the ordered list of question records of
    one Kahoot game plus the game title. This is the only object passed
    from the extractor to the renderers.

Key Functions:
    - QuestionCollection.kind_at(index): Kind of the question at index
    - QuestionCollection.true_false_at(index): Typed true/false access
    - QuestionCollection.choice_at(index): Typed choice access

Dependencies:
    - core.models.questions
    - core.errors: QuestionIndexError, TypeMismatchError

Used By:
    - extractor.pipeline: Builds the collection
    - builder.output: Renders the collection

Invariants:
    - Insertion order equals sheet order; never sorted or deduplicated
    - Accessors reject out-of-range indices and kind mismatches without
      side effects
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from kahoot_toolkit.core.errors import QuestionIndexError, TypeMismatchError

from .questions import ChoiceQuestion, Question, QuestionKind, TrueFalseQuestion

_CHOICE_KINDS = (QuestionKind.SINGLE_CHOICE, QuestionKind.MULTIPLE_CHOICE)


class QuestionCollection:
    """
    Ordered, indexed container of question records.

    Args:
        title: Title of the Kahoot game
        size_hint: Expected number of questions (informational only)

    Example:
        >>> collection = QuestionCollection("Geography")
        >>> collection.add(TrueFalseQuestion("Paris is in France.", True))
        >>> collection.kind_at(0)
        <QuestionKind.TRUE_OR_FALSE: 'true_or_false'>
    """

    def __init__(self, title: str = "", size_hint: Optional[int] = None) -> None:
        self.title = title
        self.size_hint = size_hint
        self._questions: List[Question] = []

    def add(self, question: Question) -> None:
        self._questions.append(question)

    def question_count(self) -> int:
        return len(self._questions)

    def title_text(self) -> str:
        return self.title

    def question_at(self, index: int) -> Question:
        """
        Get question at index without kind check.

        Raises:
            QuestionIndexError: index outside [0, question_count())
        """
        self._check_index(index, "question")
        return self._questions[index]

    def kind_at(self, index: int) -> QuestionKind:
        self._check_index(index, "type of question")
        return self._questions[index].kind

    def true_false_at(self, index: int) -> TrueFalseQuestion:
        """
        Get true/false question at index.

        Raises:
            QuestionIndexError: index out of range
            TypeMismatchError: question at index is not TRUE_OR_FALSE
        """
        self._check_index(index, "true/false question")
        question = self._questions[index]
        if question.kind is not QuestionKind.TRUE_OR_FALSE:
            raise TypeMismatchError(
                f"Attempt to receive question at index {index} as true/false question, "
                f"but question has another type {question.kind}."
            )
        return question

    def choice_at(self, index: int) -> ChoiceQuestion:
        """
        Get single- or multiple-choice question at index.

        Raises:
            QuestionIndexError: index out of range
            TypeMismatchError: question at index is TRUE_OR_FALSE
        """
        self._check_index(index, "choice question")
        question = self._questions[index]
        if question.kind not in _CHOICE_KINDS:
            raise TypeMismatchError(
                f"Attempt to receive question at index {index} as choice question, "
                f"but question has another type {question.kind}."
            )
        return question

    def _check_index(self, index: int, what: str) -> None:
        if index < 0 or index >= len(self._questions):
            raise QuestionIndexError(
                f"Attempt to receive {what} with illegal index {index}."
            )

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __str__(self) -> str:
        return f'Question list with {len(self._questions)} questions, titled "{self.title}".'
