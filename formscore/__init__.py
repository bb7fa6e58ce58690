"""formscore - Response scoring for cloze, comprehension and categorize forms.

Main package containing the scoring engine and its building blocks:
- formscore.answer_key: Question definitions (the answer key)
- formscore.submission: Submitted answer shapes, parsed per question type
- formscore.normalize: String and option-index normalization
- formscore.evaluator: Evaluator base class and type registry
- formscore.evaluators: Cloze, comprehension and categorize evaluators
- formscore.score_result: ScoreResult and per-question score pairs
- formscore.engine: The top-level score() function
"""

from .answer_key import (
    CategorizeQuestion,
    ClozeQuestion,
    ComprehensionQuestion,
    Question,
    QuestionType,
    UnsupportedQuestion,
    parse_question,
    parse_questions,
)
from .engine import score, score_question
from .score_result import QuestionScore, ScoreResult

__version__ = "0.1.0"

__all__ = [
    "Question",
    "QuestionType",
    "ClozeQuestion",
    "ComprehensionQuestion",
    "CategorizeQuestion",
    "UnsupportedQuestion",
    "parse_question",
    "parse_questions",
    "QuestionScore",
    "ScoreResult",
    "score",
    "score_question",
]
