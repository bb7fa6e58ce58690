"""
Base question evaluator framework.

Provides the abstract base class for question evaluators and a registry
for type-based dispatch. The engine looks each question's type up in the
global registry; types without an evaluator are counted toward the
maximum score but never earn points.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .answer_key import Question
from .score_result import QuestionScore
from .submission import Submission, parse_submission


class QuestionEvaluator(BaseModel, ABC):
    """
    Abstract base class for question evaluators.

    Each evaluator wraps one answer-key question and computes the partial
    credit earned by a submitted answer to it.

    Subclasses must implement:
    - evaluate(): Points earned for a parsed submission
    - question_type: Class variable for type identification
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Type identifier (must be set by subclasses)
    question_type: ClassVar[str] = "unknown"

    question: Question = Field(description="The answer-key question to grade against")

    @property
    def points(self) -> float:
        """Points available for the wrapped question."""
        return self.question.points

    @abstractmethod
    def evaluate(self, submission: Submission) -> float:
        """
        Compute the points earned by a submission.

        Args:
            submission: Parsed answer for this question

        Returns:
            Earned points, between 0 and self.points
        """
        pass

    def parse_submission(self, raw: Any) -> Optional[Submission]:
        """
        Parse the raw payload submitted for this question.

        Override this in subclasses that need a custom shape.
        """
        return parse_submission(self.question, raw)

    def grade(self, raw: Any) -> QuestionScore:
        """
        Grade a raw submitted payload.

        A missing or unusable payload earns nothing; the question's points
        are always counted as possible.
        """
        submission = self.parse_submission(raw)
        earned = 0.0 if submission is None else self.evaluate(submission)
        return QuestionScore(earned=earned, possible=self.points)


class EvaluatorRegistry(BaseModel):
    """
    Registry for question evaluators.

    Provides type-based dispatch to the appropriate evaluator.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _evaluators: dict[str, type[QuestionEvaluator]] = PrivateAttr(default_factory=dict)

    def register(
        self, question_type: str, evaluator_class: type[QuestionEvaluator]
    ) -> None:
        """
        Register an evaluator for a question type.

        Args:
            question_type: Type identifier (e.g., "cloze", "categorize")
            evaluator_class: Evaluator class to use for this type

        Raises:
            TypeError: If evaluator_class is not a QuestionEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, QuestionEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of QuestionEvaluator, got {evaluator_class}")
        self._evaluators[question_type] = evaluator_class

    def get_evaluator(self, question_type: Optional[str]) -> type[QuestionEvaluator] | None:
        """
        Get evaluator class for a question type.

        Returns:
            Evaluator class, or None if not found
        """
        if question_type is None:
            return None
        return self._evaluators.get(question_type)

    def evaluator_for(self, question: Question) -> Optional[QuestionEvaluator]:
        """
        Wrap a question in the evaluator registered for its type.

        Returns:
            Evaluator instance, or None when the type is not graded
        """
        evaluator_class = self.get_evaluator(question.type)
        if evaluator_class is None:
            return None
        return evaluator_class(question=question)


# Global registry instance
_global_registry = EvaluatorRegistry()


def register_evaluator(
    question_type: str, evaluator_class: type[QuestionEvaluator]
) -> None:
    """Register an evaluator in the global registry."""
    _global_registry.register(question_type, evaluator_class)


def evaluator_for(question: Question) -> Optional[QuestionEvaluator]:
    """Evaluator from the global registry for a question, or None."""
    return _global_registry.evaluator_for(question)
