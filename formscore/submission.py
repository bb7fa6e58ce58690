"""
Submitted answer shapes.

A submission is a mapping from question id to a payload whose shape
depends on the question's type. The payload carries no type field of its
own, so it is always parsed against the question it answers:

- cloze: ``{"answers": ["brown", "lazy"]}``
- comprehension: ``{"answers": [2, 1]}`` (1-based option numbers)
- categorize: ``{"categories": {"Fruits": ["Apple"], "Veggies": []}}``
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .answer_key import Question, QuestionType


class Submission(BaseModel):
    """Base class for a respondent's answer to one question"""

    model_config = ConfigDict(extra="ignore", frozen=True)


def _filled(answer: Any) -> bool:
    if answer is None or isinstance(answer, bool):
        return bool(answer)
    if isinstance(answer, (int, float)):
        return answer == answer and answer != 0
    return answer != ""


class ClozeSubmission(Submission):
    """
    Text typed or chosen for each blank, in blank order.

    Empty values (None, 0, False, NaN) count as a blank left empty.
    """

    answers: list[str] = Field(default_factory=list)

    @field_validator("answers", mode="before")
    @classmethod
    def validate_answers(cls, v: Any) -> list[str]:
        if not isinstance(v, (list, tuple)):
            return []
        return [str(answer) if _filled(answer) else "" for answer in v]


class ComprehensionSubmission(Submission):
    """
    Selected option number for each sub-question, in order.

    Values are kept raw; they are parsed as integers at comparison time so
    that a malformed entry fails to match rather than failing validation.
    """

    answers: list[Any] = Field(default_factory=list)

    @field_validator("answers", mode="before")
    @classmethod
    def validate_answers(cls, v: Any) -> list[Any]:
        return list(v) if isinstance(v, (list, tuple)) else []


class CategorizeSubmission(Submission):
    """
    Category name -> item labels the respondent placed in it.

    Only string labels can name an item; anything else is dropped.
    """

    categories: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("categories", mode="before")
    @classmethod
    def validate_categories(cls, v: Any) -> dict[str, list[str]]:
        if not isinstance(v, Mapping):
            return {}
        return {
            str(name): [label for label in labels if isinstance(label, str)]
            for name, labels in v.items()
            if isinstance(labels, (list, tuple))
        }


SUBMISSION_MODELS: dict[str, type[Submission]] = {
    QuestionType.CLOZE.value: ClozeSubmission,
    QuestionType.COMPREHENSION.value: ComprehensionSubmission,
    QuestionType.CATEGORIZE.value: CategorizeSubmission,
}


def parse_submission(question: Question, raw: Any) -> Optional[Submission]:
    """
    Parse the raw answer payload for a question.

    Args:
        question: The answer-key question being answered
        raw: The payload submitted under the question's id (may be None)

    Returns:
        The submission shape for the question's type, or None when nothing
        usable was submitted or the question type is not graded
    """
    model = SUBMISSION_MODELS.get(question.type) if question.type is not None else None
    if model is None:
        return None
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        return None
    return model.model_validate(raw)


def answer_for(answers: Mapping[Any, Any], question_id: Any) -> Any:
    """
    Find the payload submitted for a question id.

    The raw id is tried first. Failing that, keys are compared by their
    string form, so an id of 1 finds an answer stored under "1" and the
    other way round, as with keys of a JSON object.

    Returns:
        The payload, or None when nothing was submitted for the id
    """
    if isinstance(question_id, Hashable) and question_id in answers:
        return answers[question_id]
    wanted = str(question_id)
    for key, payload in answers.items():
        if str(key) == wanted:
            return payload
    return None
