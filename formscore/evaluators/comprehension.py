"""
Comprehension (passage + multiple choice) evaluator.

The answer key numbers options from 0 while submissions number them from
1; key values go through key_to_submission_index() before comparison.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..answer_key import ComprehensionQuestion, ComprehensionSubQuestion
from ..evaluator import QuestionEvaluator
from ..normalize import key_to_submission_index, parse_option_index
from ..submission import ComprehensionSubmission

logger = logging.getLogger(__name__)


def _correct_answer(sub_question: ComprehensionSubQuestion | Mapping[str, Any]) -> Any:
    if isinstance(sub_question, Mapping):
        return sub_question.get("correctAnswer")
    return sub_question.correct_answer


def score_comprehension(
    sub_questions: Sequence[ComprehensionSubQuestion | Mapping[str, Any]],
    provided: Sequence[Any],
    points: float,
) -> float:
    """
    Score the options chosen for a comprehension question.

    Args:
        sub_questions: Answer-key sub-questions (0-based correctAnswer), in order
        provided: Chosen option numbers (1-based), index-aligned with sub_questions
        points: Points available for the question

    Returns:
        Earned points; each sub-question is worth
        ``points / max(len(sub_questions), len(provided))``
    """
    count = max(len(sub_questions), len(provided))
    if count == 0:
        return 0.0

    per_sub_question = points / count
    earned = 0.0
    for index, (sub_question, given) in enumerate(zip(sub_questions, provided)):
        chosen = parse_option_index(given)
        expected = key_to_submission_index(_correct_answer(sub_question))
        is_correct = chosen is not None and chosen == expected
        if is_correct:
            earned += per_sub_question
        logger.debug("Sub-question %d: chosen=%r expected=%r correct=%s", index, chosen, expected, is_correct)
    return earned


class ComprehensionEvaluator(QuestionEvaluator):
    """Evaluator for comprehension questions"""

    question_type = "comprehension"

    question: ComprehensionQuestion

    def evaluate(self, submission: ComprehensionSubmission) -> float:
        return score_comprehension(self.question.questions, submission.answers, self.points)
