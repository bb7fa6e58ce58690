"""
Response scoring engine.

Folds the per-question (earned, possible) pairs of a submission into a
ScoreResult. The engine is a pure function of its inputs: it reads the
answer key and the submitted answers and returns a new result.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any, Iterable, Mapping, Optional

from . import evaluators  # noqa: F401  (registers the built-in evaluators)
from .answer_key import Question, parse_question
from .evaluator import evaluator_for
from .score_result import QuestionScore, ScoreResult
from .submission import answer_for

logger = logging.getLogger(__name__)


def score_question(question: Question | Mapping[str, Any], raw_answer: Any = None) -> QuestionScore:
    """
    Score one question.

    Args:
        question: Answer-key question (mapping or Question)
        raw_answer: Payload submitted for the question, or None

    Returns:
        QuestionScore with the earned and possible points; questions of an
        unsupported type only contribute possible points
    """
    question = parse_question(question)
    evaluator = evaluator_for(question)
    if evaluator is None:
        logger.debug("Question %r has unsupported type %r; counting points only", question.id, question.type)
        return QuestionScore(possible=question.points)

    result = evaluator.grade(raw_answer)
    logger.debug(
        "Question %r (%s): earned %s of %s",
        question.id, question.type, result.earned, result.possible,
    )
    return result


def score(
    questions: Optional[Iterable[Question | Mapping[str, Any]]],
    answers: Optional[Mapping[Any, Any]] = None,
) -> ScoreResult:
    """
    Score a submission against a form's answer key.

    Args:
        questions: The form's questions, in order (mappings or Question objects)
        answers: Submitted payloads keyed by question id (raw or string
            form); ids missing from the key are ignored and questions
            missing here earn nothing

    Returns:
        ScoreResult with score rounded to 2 decimals, the maximum score and
        the integer percentage (0 when the maximum is 0)

    Examples:
        >>> score([{"id": "q1", "type": "cloze", "points": 2, "blanks": [{"answer": "brown"}]}],
        ...       {"q1": {"answers": ["Brown"]}}).to_dict()
        {'score': 2.0, 'maxScore': 2.0, 'scorePercentage': 100}
    """
    answers = answers or {}

    def fold(total: QuestionScore, entry: Question | Mapping[str, Any]) -> QuestionScore:
        question = parse_question(entry)
        return total + score_question(question, answer_for(answers, question.id))

    total = reduce(fold, questions or [], QuestionScore())
    result = ScoreResult.from_total(total)

    logger.debug(
        "Final score: %s/%s = %d%%",
        result.score, result.max_score, result.score_percentage,
    )
    return result
