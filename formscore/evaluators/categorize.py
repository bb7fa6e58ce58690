"""
Categorize evaluator.

Each item is worth an equal share of the question's points. The
submission lists items per category; it is inverted once into
item -> category and every item's placement is compared with the
category the key assigns it to.

Items are identified by label. Two items with the same label are the
same entity as far as placement lookup is concerned.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..answer_key import CategorizeQuestion
from ..evaluator import QuestionEvaluator
from ..normalize import invert_placements, normalize_text
from ..submission import CategorizeSubmission

logger = logging.getLogger(__name__)


def score_categorize(
    categories: Optional[Sequence[str]],
    items: Optional[Sequence[str]],
    item_assignments: Mapping[int, int],
    provided_map: Mapping[str, Sequence[str]],
    points: float,
) -> float:
    """
    Score the item placements submitted for a categorize question.

    Args:
        categories: Category names, in key order
        items: Item labels, in key order
        item_assignments: Item index -> index of its correct category
        provided_map: Category name -> item labels placed there by the respondent
        points: Points available for the question

    Returns:
        Earned points. Items without a valid assignment are skipped and
        earn nothing; category names compare case- and whitespace-insensitively.
    """
    if not item_assignments or categories is None or not items:
        logger.debug(
            "Nothing to score: assignments=%d categories=%s items=%s",
            len(item_assignments or {}),
            None if categories is None else len(categories),
            None if items is None else len(items),
        )
        return 0.0

    per_item = points / len(items)
    placements = invert_placements(provided_map)
    earned = 0.0

    for index, item in enumerate(items):
        category_index = item_assignments.get(index)
        if category_index is None or not 0 <= category_index < len(categories):
            logger.debug("Item %d (%r): no valid category assignment (%r)", index, item, category_index)
            continue

        expected = normalize_text(categories[category_index])
        placed_in = placements.get(item)
        is_correct = placed_in is not None and normalize_text(placed_in) == expected
        if is_correct:
            earned += per_item
        logger.debug("Item %d (%r): placed=%r expected=%r correct=%s", index, item, placed_in, expected, is_correct)

    return earned


class CategorizeEvaluator(QuestionEvaluator):
    """Evaluator for categorize questions"""

    question_type = "categorize"

    question: CategorizeQuestion

    def evaluate(self, submission: CategorizeSubmission) -> float:
        return score_categorize(
            self.question.categories,
            self.question.items,
            self.question.item_assignments,
            submission.categories,
            self.points,
        )
