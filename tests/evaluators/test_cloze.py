"""Tests for the cloze evaluator."""

import pytest

from formscore.answer_key import parse_question
from formscore.evaluators import ClozeEvaluator, score_cloze
from formscore.score_result import QuestionScore

BLANKS = [{"answer": "brown"}, {"answer": "lazy"}]


class TestScoreCloze:
    """Test the per-blank comparison."""

    def test_full_credit_ignores_case_and_whitespace(self):
        """Test that "Brown" and " lazy " match "brown" and "lazy"."""
        assert score_cloze(BLANKS, ["Brown", " lazy "], 2) == 2

    def test_partial_credit_with_one_empty_answer(self):
        """Test that only the matching blank earns its share."""
        assert score_cloze(BLANKS, ["brown", ""], 2) == 1

    def test_wrong_answers_earn_nothing(self):
        assert score_cloze(BLANKS, ["red", "sleepy"], 2) == 0

    def test_fewer_answers_than_blanks(self):
        """Test that missing trailing answers still count toward the divisor."""
        assert score_cloze(BLANKS, ["brown"], 2) == 1

    def test_more_answers_than_blanks_never_full_credit(self):
        """Test that extra answers dilute the per-blank share."""
        earned = score_cloze(BLANKS, ["brown", "lazy", "extra"], 3)
        assert earned == pytest.approx(2.0)
        assert earned < 3

    def test_no_blanks_and_no_answers(self):
        assert score_cloze([], [], 5) == 0

    def test_answers_without_blanks(self):
        assert score_cloze([], ["brown"], 5) == 0

    def test_inner_whitespace_matters(self):
        assert score_cloze([{"answer": "ice cream"}], ["icecream"], 1) == 0

    def test_empty_key_answer_matches_empty_submission(self):
        assert score_cloze([{"answer": ""}], [""], 1) == 1

    def test_accepts_parsed_blanks(self, cloze_question):
        question = parse_question(cloze_question)
        assert score_cloze(question.blanks, ["BROWN", "LAZY"], question.points) == 2

    @pytest.mark.parametrize("points", [0, 1, 2.5, 10])
    def test_bounded_by_points(self, points):
        assert 0 <= score_cloze(BLANKS, ["brown", "lazy"], points) <= points


class TestClozeEvaluator:
    """Test grading raw payloads through the evaluator."""

    def test_grade(self, cloze_question):
        evaluator = ClozeEvaluator(question=parse_question(cloze_question))
        assert evaluator.grade({"answers": ["brown", "nope"]}) == QuestionScore(earned=1, possible=2)

    def test_missing_submission_counts_possible_points(self, cloze_question):
        evaluator = ClozeEvaluator(question=parse_question(cloze_question))
        assert evaluator.grade(None) == QuestionScore(earned=0, possible=2)

    def test_question_type(self):
        assert ClozeEvaluator.question_type == "cloze"
