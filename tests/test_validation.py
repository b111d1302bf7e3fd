import pytest

from academy.domain.quiz.errors import QuizValidationError
from academy.domain.quiz.validation import (
    validate_answers_payload,
    validate_quiz_definition,
    validate_quiz_settings,
)

from tests.builders import mc, text, tf


class TestValidateAnswersPayload:
    def test_accepts_well_formed(self):
        cleaned = validate_answers_payload([
            {"question_id": "q1", "answer": "B", "extra": 1},
            {"question_id": 2, "answer": None},
        ])
        assert cleaned == [
            {"question_id": "q1", "answer": "B"},
            {"question_id": "2", "answer": None},
        ]

    def test_empty_list_is_allowed(self):
        assert validate_answers_payload([]) == []

    @pytest.mark.parametrize("payload", [None, {}, "q1", 3])
    def test_rejects_non_list(self, payload):
        with pytest.raises(QuizValidationError, match="Answers array is required"):
            validate_answers_payload(payload)

    def test_rejects_missing_question_id(self):
        with pytest.raises(QuizValidationError, match="question_id"):
            validate_answers_payload([{"answer": "B"}])

    def test_rejects_missing_answer(self):
        with pytest.raises(QuizValidationError, match="answer is required"):
            validate_answers_payload([{"question_id": "q1"}])

    def test_rejects_duplicates(self):
        with pytest.raises(QuizValidationError, match="duplicate"):
            validate_answers_payload([
                {"question_id": "q1", "answer": "A"},
                {"question_id": "q1", "answer": "B"},
            ])

    def test_error_code(self):
        with pytest.raises(QuizValidationError) as exc_info:
            validate_answers_payload([1])
        assert exc_info.value.code == "validation_error"


class TestValidateQuizDefinition:
    def test_valid_quiz(self):
        validate_quiz_definition([mc("q1"), mc("q2", correct=["A", "B"]), tf("q3"), text("q4")])

    def test_empty_quiz(self):
        with pytest.raises(QuizValidationError, match="at least one question"):
            validate_quiz_definition([])

    def test_duplicate_ids(self):
        with pytest.raises(QuizValidationError, match="duplicate id"):
            validate_quiz_definition([mc("q1"), tf("q1")])

    def test_invalid_type(self):
        bad = {"id": "q1", "question": "?", "type": "essay", "correct_answer": "x"}
        with pytest.raises(QuizValidationError, match="Invalid question type"):
            validate_quiz_definition([bad])

    def test_multiple_choice_needs_two_options(self):
        with pytest.raises(QuizValidationError, match="at least 2 options"):
            validate_quiz_definition([mc("q1", correct="A", options=("A",))])

    def test_multiple_choice_correct_must_be_an_option(self):
        with pytest.raises(QuizValidationError, match="not in the options list"):
            validate_quiz_definition([mc("q1", correct="Z")])

    def test_true_false_needs_boolean(self):
        with pytest.raises(QuizValidationError, match="true or false"):
            validate_quiz_definition([tf("q1", correct="yes")])

    def test_text_needs_answer(self):
        with pytest.raises(QuizValidationError, match="Text questions"):
            validate_quiz_definition([text("q1", correct="")])

    def test_negative_points(self):
        with pytest.raises(QuizValidationError, match="non-negative"):
            validate_quiz_definition([mc("q1", points=-1)])


class TestValidateQuizSettings:
    @pytest.mark.parametrize("time_limit, passing_score", [(None, None), (0, 0), (10, 70), (2.5, 100)])
    def test_accepts_numbers(self, time_limit, passing_score):
        validate_quiz_settings(time_limit, passing_score)

    @pytest.mark.parametrize("passing_score", ["seventy", "70", True, -1, 101, [70]])
    def test_rejects_bad_passing_score(self, passing_score):
        with pytest.raises(QuizValidationError, match="Passing score"):
            validate_quiz_settings(None, passing_score)

    @pytest.mark.parametrize("time_limit", ["ten", False, -5, {"minutes": 10}])
    def test_rejects_bad_time_limit(self, time_limit):
        with pytest.raises(QuizValidationError, match="Time limit"):
            validate_quiz_settings(time_limit, None)
