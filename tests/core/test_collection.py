"""
Unit Tests for QuestionCollection

Tests indexed and typed access, ordering and error behavior.
"""

import pytest

from kahoot_toolkit.core.errors import QuestionIndexError, TypeMismatchError
from kahoot_toolkit.core.models import (
    ChoiceQuestion,
    QuestionCollection,
    QuestionKind,
    TrueFalseQuestion,
)


@pytest.fixture
def collection() -> QuestionCollection:
    choice = ChoiceQuestion(QuestionKind.SINGLE_CHOICE, "Capital of France?")
    choice.add_option("Paris", True)
    choice.add_option("Rome", False)

    result = QuestionCollection("Geography", size_hint=2)
    result.add(choice)
    result.add(TrueFalseQuestion("Beijing is the capital of China.", True))
    return result


class TestQuestionCollection:
    """Tests for QuestionCollection accessors."""

    def test_question_count_when_questions_added_then_matches(self, collection):
        assert collection.question_count() == 2
        assert len(collection) == 2

    def test_title_text_when_set_then_returned(self, collection):
        assert collection.title_text() == "Geography"

    def test_iter_when_iterated_then_insertion_order(self, collection):
        kinds = [q.kind for q in collection]
        assert kinds == [QuestionKind.SINGLE_CHOICE, QuestionKind.TRUE_OR_FALSE]

    def test_kind_at_when_valid_index_then_returns_kind(self, collection):
        assert collection.kind_at(1) is QuestionKind.TRUE_OR_FALSE

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_kind_at_when_index_out_of_range_then_raises_error(self, collection, index):
        with pytest.raises(QuestionIndexError, match=f"illegal index {index}"):
            collection.kind_at(index)

    def test_true_false_at_when_true_false_then_returns_record(self, collection):
        q = collection.true_false_at(1)
        assert q.statement_text == "Beijing is the capital of China."

    def test_true_false_at_when_choice_question_then_raises_type_mismatch(self, collection):
        with pytest.raises(TypeMismatchError, match="as true/false question"):
            collection.true_false_at(0)

    def test_choice_at_when_true_false_then_raises_type_mismatch(self, collection):
        with pytest.raises(TypeMismatchError, match="as choice question"):
            collection.choice_at(1)

    def test_choice_at_when_out_of_range_then_raises_index_error(self, collection):
        with pytest.raises(IndexError):
            collection.choice_at(5)

    def test_accessor_when_failing_then_collection_unchanged(self, collection):
        with pytest.raises(TypeMismatchError):
            collection.choice_at(1)
        assert collection.question_count() == 2
        assert collection.choice_at(0).num_answered == 2

    def test_str_when_formatted_then_mentions_count_and_title(self, collection):
        assert str(collection) == 'Question list with 2 questions, titled "Geography".'
