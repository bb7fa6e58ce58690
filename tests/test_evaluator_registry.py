"""Tests for the evaluator base class and registry."""

import pytest

import formscore.evaluators  # noqa: F401
from formscore.answer_key import QuestionType, parse_question
from formscore.engine import score_question
from formscore.evaluator import EvaluatorRegistry, QuestionEvaluator, evaluator_for
from formscore.evaluators import CategorizeEvaluator, ClozeEvaluator, ComprehensionEvaluator
from formscore.submission import Submission


class TestQuestionEvaluator:
    """Test the abstract base class."""

    def test_cannot_instantiate_abstract_class(self, cloze_question):
        with pytest.raises(TypeError):
            QuestionEvaluator(question=parse_question(cloze_question))

    def test_subclass_must_implement_evaluate(self, cloze_question):
        class MinimalEvaluator(QuestionEvaluator):
            pass

        with pytest.raises(TypeError):
            MinimalEvaluator(question=parse_question(cloze_question))

    def test_points_come_from_question(self, cloze_question):
        evaluator = ClozeEvaluator(question=parse_question(cloze_question))
        assert evaluator.points == 2


class TestEvaluatorRegistry:
    """Test a standalone registry."""

    def test_register_and_get(self):
        registry = EvaluatorRegistry()
        registry.register("cloze", ClozeEvaluator)
        assert registry.get_evaluator("cloze") is ClozeEvaluator

    def test_get_unknown(self):
        registry = EvaluatorRegistry()
        assert registry.get_evaluator("essay") is None
        assert registry.get_evaluator(None) is None

    def test_register_rejects_non_evaluator(self):
        registry = EvaluatorRegistry()
        with pytest.raises(TypeError):
            registry.register("cloze", dict)

    def test_evaluator_for(self, cloze_question):
        registry = EvaluatorRegistry()
        registry.register("cloze", ClozeEvaluator)
        question = parse_question(cloze_question)
        evaluator = registry.evaluator_for(question)
        assert isinstance(evaluator, ClozeEvaluator)
        assert evaluator.question is question

    def test_evaluator_for_unregistered_type(self, cloze_question):
        assert EvaluatorRegistry().evaluator_for(parse_question(cloze_question)) is None

    def test_registries_are_independent(self):
        first = EvaluatorRegistry()
        first.register("cloze", ClozeEvaluator)
        assert EvaluatorRegistry().get_evaluator("cloze") is None

    def test_custom_evaluator(self):
        class EveryoneWins(QuestionEvaluator):
            question_type = "participation"

            def evaluate(self, submission: Submission) -> float:
                return self.points

            def parse_submission(self, raw):
                return Submission()

        registry = EvaluatorRegistry()
        registry.register("participation", EveryoneWins)
        question = parse_question({"id": "p", "type": "participation", "points": 3})
        result = registry.evaluator_for(question).grade(None)
        assert result.earned == 3


class TestGlobalRegistry:
    """Test the built-in registrations."""

    @pytest.mark.parametrize("question_type", list(QuestionType))
    def test_every_question_type_has_an_evaluator(self, question_type):
        """Test that dispatch covers every QuestionType member."""
        question = parse_question({"id": "q", "type": question_type.value})
        assert evaluator_for(question) is not None

    @pytest.mark.parametrize(
        "question_type,expected",
        [
            ("cloze", ClozeEvaluator),
            ("comprehension", ComprehensionEvaluator),
            ("categorize", CategorizeEvaluator),
        ],
    )
    def test_builtin_mapping(self, question_type, expected):
        question = parse_question({"id": "q", "type": question_type})
        assert isinstance(evaluator_for(question), expected)

    def test_unsupported_type_has_no_evaluator(self):
        assert evaluator_for(parse_question({"id": "q", "type": "essay"})) is None

    def test_engine_dispatches_through_registry(self, categorize_question):
        """Test that score_question grades with the registered evaluator."""
        raw = {"categories": {"Fruits": ["Apple", "Banana"], "Veggies": ["Carrot"]}}
        expected = evaluator_for(parse_question(categorize_question)).grade(raw)
        assert score_question(categorize_question, raw) == expected
        assert expected.earned == 3
