"""
Type-specific question evaluators.

Each module implements the comparator for one question type. Importing
this package registers the evaluators in the global registry.
"""

from ..answer_key import QuestionType
from ..evaluator import register_evaluator
from .categorize import CategorizeEvaluator, score_categorize
from .cloze import ClozeEvaluator, score_cloze
from .comprehension import ComprehensionEvaluator, score_comprehension

register_evaluator(QuestionType.CLOZE.value, ClozeEvaluator)
register_evaluator(QuestionType.COMPREHENSION.value, ComprehensionEvaluator)
register_evaluator(QuestionType.CATEGORIZE.value, CategorizeEvaluator)

__all__ = [
    "ClozeEvaluator",
    "ComprehensionEvaluator",
    "CategorizeEvaluator",
    "score_cloze",
    "score_comprehension",
    "score_categorize",
]
