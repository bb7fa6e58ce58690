"""
Cloze (fill-in-the-gap) evaluator.

Each blank is worth an equal share of the question's points. Answers are
compared case- and whitespace-insensitively, position by position.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..answer_key import ClozeBlank, ClozeQuestion
from ..evaluator import QuestionEvaluator
from ..normalize import normalize_text
from ..submission import ClozeSubmission

logger = logging.getLogger(__name__)


def _blank_answer(blank: ClozeBlank | Mapping[str, Any]) -> Any:
    if isinstance(blank, Mapping):
        return blank.get("answer")
    return blank.answer


def score_cloze(
    blanks: Sequence[ClozeBlank | Mapping[str, Any]],
    provided: Sequence[Any],
    points: float,
) -> float:
    """
    Score the answers given for a cloze question.

    The share per blank is ``points / max(len(blanks), len(provided))``, so
    an answer list longer or shorter than the key can never earn full
    credit, even when every overlapping position matches.

    Args:
        blanks: Answer-key blanks, in order
        provided: Submitted answers, index-aligned with blanks
        points: Points available for the question

    Returns:
        Earned points
    """
    expected = [_blank_answer(blank) for blank in blanks]
    count = max(len(expected), len(provided))
    if count == 0:
        return 0.0

    per_blank = points / count
    earned = 0.0
    for index, (answer, given) in enumerate(zip(expected, provided)):
        is_correct = normalize_text(given) == normalize_text(answer)
        if is_correct:
            earned += per_blank
        logger.debug("Blank %d: given=%r expected=%r correct=%s", index, given, answer, is_correct)
    return earned


class ClozeEvaluator(QuestionEvaluator):
    """Evaluator for cloze questions"""

    question_type = "cloze"

    question: ClozeQuestion

    def evaluate(self, submission: ClozeSubmission) -> float:
        return score_cloze(self.question.blanks, submission.answers, self.points)
