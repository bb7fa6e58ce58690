"""
Answer key data structures.

A form's answer key is an ordered list of questions. Each question carries
its type, its point value and a type-specific representation of the
correct answer:

- cloze: ``blanks``, one ``{answer}`` per gap
- comprehension: ``questions``, one ``{correctAnswer}`` (0-based) per sub-question
- categorize: ``categories``, ``items`` and ``itemAssignments`` (item index -> category index)

Keys arrive as already-deserialized JSON mappings. Parsing is permissive:
irregular values fall back to defaults instead of raising, so one odd
field never aborts scoring of the rest of the form.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalize import as_index

DEFAULT_POINTS = 1.0


class QuestionType(str, Enum):
    """Question types understood by the engine"""
    CLOZE = "cloze"
    COMPREHENSION = "comprehension"
    CATEGORIZE = "categorize"


def coerce_points(value: Any) -> float:
    """
    Read a question's point value.

    Missing, zero, negative, non-numeric and non-finite values (and
    booleans) fall back to DEFAULT_POINTS. Numeric strings are accepted.
    A cleared points field is stored as 0, so 0 reads as the default.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_POINTS
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return DEFAULT_POINTS
    if not isinstance(value, (int, float)):
        return DEFAULT_POINTS
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_POINTS
    return value


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


class Question(BaseModel):
    """
    Base answer-key question.

    Attributes:
        id: Question identifier as stored in the key (kept raw); submitted
            answers are keyed by it
        type: Raw type string (see QuestionType)
        points: Total points available for this question
        title: Display title (not used for scoring)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: Any = ""
    type: Optional[str] = None
    points: float = DEFAULT_POINTS
    title: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("title", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> Optional[str]:
        if isinstance(v, Enum):
            return str(v.value)
        return None if v is None else str(v)

    @field_validator("points", mode="before")
    @classmethod
    def validate_points(cls, v: Any) -> float:
        return coerce_points(v)

    @property
    def question_type(self) -> Optional[QuestionType]:
        """The QuestionType member for this question, or None if unsupported."""
        try:
            return QuestionType(self.type)
        except ValueError:
            return None


class ClozeBlank(BaseModel):
    """One gap in a cloze sentence"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    answer: str = ""
    options: list[str] = Field(default_factory=list)

    @field_validator("id", "answer", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("options", mode="before")
    @classmethod
    def validate_options(cls, v: Any) -> list[str]:
        return [str(option) for option in _as_list(v)]


class ClozeQuestion(Question):
    """Fill-in-the-gap question"""

    type: Optional[str] = QuestionType.CLOZE.value
    sentence: str = ""
    blanks: list[ClozeBlank] = Field(default_factory=list)

    @field_validator("sentence", mode="before")
    @classmethod
    def validate_sentence(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("blanks", mode="before")
    @classmethod
    def validate_blanks(cls, v: Any) -> list[Any]:
        # Non-mapping entries still occupy a position in the blank order
        return [
            blank if isinstance(blank, (Mapping, ClozeBlank)) else {}
            for blank in _as_list(v)
        ]


class ComprehensionSubQuestion(BaseModel):
    """
    One multiple-choice question following a comprehension passage.

    ``correct_answer`` is the 0-based index of the correct option. It is
    kept as given (Any) so that a malformed key never matches instead of
    failing validation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = ""
    question: str = ""
    options: list[str] = Field(default_factory=list)
    correct_answer: Any = Field(default=None, alias="correctAnswer")

    @field_validator("id", "question", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("options", mode="before")
    @classmethod
    def validate_options(cls, v: Any) -> list[str]:
        return [str(option) for option in _as_list(v)]


class ComprehensionQuestion(Question):
    """Reading passage with multiple-choice sub-questions"""

    type: Optional[str] = QuestionType.COMPREHENSION.value
    passage: str = ""
    questions: list[ComprehensionSubQuestion] = Field(default_factory=list)

    @field_validator("passage", mode="before")
    @classmethod
    def validate_passage(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("questions", mode="before")
    @classmethod
    def validate_questions(cls, v: Any) -> list[Any]:
        return [
            sub if isinstance(sub, (Mapping, ComprehensionSubQuestion)) else {}
            for sub in _as_list(v)
        ]


class CategorizeQuestion(Question):
    """
    Items to be sorted into categories.

    ``item_assignments`` maps an item's index in ``items`` to the index of
    its correct category in ``categories``. JSON object keys arrive as
    strings and are coerced to integers; entries that are not integer
    indices are dropped.
    """

    type: Optional[str] = QuestionType.CATEGORIZE.value
    categories: Optional[list[str]] = None
    items: Optional[list[str]] = None
    item_assignments: dict[int, int] = Field(default_factory=dict, alias="itemAssignments")

    @field_validator("categories", "items", mode="before")
    @classmethod
    def validate_labels(cls, v: Any) -> Optional[list[str]]:
        if v is None:
            return None
        return [str(label) for label in _as_list(v)]

    @field_validator("item_assignments", mode="before")
    @classmethod
    def validate_item_assignments(cls, v: Any) -> dict[int, int]:
        if not isinstance(v, Mapping):
            return {}
        assignments: dict[int, int] = {}
        for item_index, category_index in v.items():
            item_index = as_index(item_index)
            category_index = as_index(category_index)
            if item_index is not None and category_index is not None:
                assignments[item_index] = category_index
        return assignments


class UnsupportedQuestion(Question):
    """Question of a type the engine does not grade; it only contributes points."""


QUESTION_MODELS: dict[str, type[Question]] = {
    QuestionType.CLOZE.value: ClozeQuestion,
    QuestionType.COMPREHENSION.value: ComprehensionQuestion,
    QuestionType.CATEGORIZE.value: CategorizeQuestion,
}


def parse_question(data: Question | Mapping[str, Any]) -> Question:
    """
    Build a Question from an answer-key entry.

    Args:
        data: A question mapping (as stored with the form) or a Question

    Returns:
        The matching Question subclass; unknown types give UnsupportedQuestion

    Raises:
        TypeError: If data is neither a mapping nor a Question
    """
    if isinstance(data, Question):
        return data
    if not isinstance(data, Mapping):
        raise TypeError(f"question must be a mapping, got {type(data).__name__}")

    question_type = data.get("type")
    if isinstance(question_type, Enum):
        question_type = question_type.value
    if not isinstance(question_type, str):
        return UnsupportedQuestion.model_validate(data)
    model = QUESTION_MODELS.get(question_type, UnsupportedQuestion)
    return model.model_validate(data)


def parse_questions(data: Iterable[Question | Mapping[str, Any]] | None) -> list[Question]:
    """Parse a whole answer key, preserving question order."""
    if data is None:
        return []
    return [parse_question(entry) for entry in data]
