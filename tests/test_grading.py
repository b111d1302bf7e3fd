import pytest

from academy.domain.quiz import grading
from academy.domain.quiz.entities import QuestionDefinition

from tests.builders import mc, text, tf


def q(data):
    return QuestionDefinition.from_dict(data)


class TestIsAnswerCorrect:
    def test_multiple_choice_single_is_case_sensitive(self):
        question = q(mc("q1", correct="B"))
        assert grading.is_answer_correct(question, "B")
        assert not grading.is_answer_correct(question, "b")
        assert not grading.is_answer_correct(question, ["B", "C"])

    def test_multi_select_is_order_independent(self):
        question = q(mc("q1", correct=["A", "C"]))
        assert grading.is_answer_correct(question, ["C", "A"])
        assert grading.is_answer_correct(question, ["A", "C"])
        assert not grading.is_answer_correct(question, ["A"])
        assert not grading.is_answer_correct(question, ["A", "C", "C"])

    def test_multi_select_scalar_answer(self):
        question = q(mc("q1", correct=["A"]))
        assert grading.is_answer_correct(question, "A")

    @pytest.mark.parametrize("answer", [True, "true"])
    def test_true_false_normalizes_true(self, answer):
        assert grading.is_answer_correct(q(tf("q2", correct=True)), answer)
        assert grading.is_answer_correct(q(tf("q2", correct="true")), answer)

    @pytest.mark.parametrize("answer", ["True", "yes", 1, None, "1"])
    def test_true_false_rejects_other_values(self, answer):
        assert not grading.is_answer_correct(q(tf("q2", correct=True)), answer)

    def test_text_is_trimmed_and_case_insensitive(self):
        question = q(text("q3", correct="Paris"))
        assert grading.is_answer_correct(question, "  paris ")
        assert grading.is_answer_correct(question, "PARIS")
        assert not grading.is_answer_correct(question, "Pariss")
        assert not grading.is_answer_correct(question, None)

    def test_unknown_type_is_incorrect(self):
        question = QuestionDefinition(id="x", question="?", type="essay", correct_answer="a")
        assert not grading.is_answer_correct(question, "a")


class TestGrade:
    def test_unknown_question_scores_zero_of_zero(self):
        questions = [q(mc("q1"))]
        graded = grading.grade([{"question_id": "nope", "answer": "B"}], questions)
        unknown = graded[0]
        assert unknown.question_id == "nope"
        assert unknown.is_correct is False
        assert unknown.points_possible == 0.0
        # 답하지 않은 q1 은 결과에 없음
        assert len(graded) == 1

    def test_only_submitted_answers_in_submission_order(self):
        questions = [q(mc("q1")), q(tf("q2")), q(text("q3"))]
        graded = grading.grade(
            [
                {"question_id": "q3", "answer": "paris"},
                {"question_id": "q1", "answer": "A"},
            ],
            questions,
        )
        assert [a.question_id for a in graded] == ["q3", "q1"]

    def test_points_default_and_zero(self):
        questions = [q(mc("q1")), q(mc("q2", points=0)), q(mc("q3", points=2.5))]
        graded = grading.grade(
            [{"question_id": qid, "answer": "B"} for qid in ("q1", "q2", "q3")],
            questions,
        )
        assert [a.points_possible for a in graded] == [10.0, 0.0, 2.5]
        assert [a.points_earned for a in graded] == [10.0, 0.0, 2.5]


class TestScore:
    def test_two_of_three(self):
        questions = [q(mc("q1")), q(tf("q2")), q(text("q3"))]
        graded = grading.grade(
            [
                {"question_id": "q1", "answer": "B"},
                {"question_id": "q2", "answer": "true"},
                {"question_id": "q3", "answer": "London"},
            ],
            questions,
        )
        summary = grading.summarize(graded, passing_score=70)
        assert summary.total_points == 20.0
        assert summary.max_points == 30.0
        assert summary.score == 67
        assert summary.passed is False

    def test_half_rounds_up(self):
        assert grading.calculate_score(1, 8) == 13  # 12.5
        assert grading.calculate_score(5, 8) == 63  # 62.5

    def test_zero_max_points(self):
        assert grading.calculate_score(0, 0) == 0
        summary = grading.summarize([], passing_score=0)
        assert summary.score == 0
        assert summary.passed is True

    def test_partial_submission_counts_only_answered_points(self):
        questions = [q(text("q1", correct="Paris")), q(text("q2")), q(text("q3"))]
        summary = grading.summarize(
            grading.grade([{"question_id": "q1", "answer": "paris"}], questions),
            passing_score=70,
        )
        assert (summary.max_points, summary.score) == (10.0, 100)
        assert summary.passed is True

    def test_passed_at_threshold(self):
        assert grading.summarize(
            grading.grade(
                [
                    {"question_id": "q1", "answer": "B"},
                    {"question_id": "q2", "answer": "A"},
                ],
                [q(mc("q1", points=7)), q(mc("q2", points=3))],
            ),
            passing_score=70,
        ).passed is True
