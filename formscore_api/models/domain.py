"""
Domain models for the scoring layer.

These are the entities the calling layer exchanges with its collaborators.
The answer key is kept as raw question mappings; the engine parses it.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from formscore import ScoreResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FormStatus(str, Enum):
    """Form publication states"""
    DRAFT = "draft"
    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"


class Form(BaseModel):
    """A form and its answer key"""
    id: str = Field(..., description="Form identifier")
    title: str = Field(..., description="Form title")
    description: str = ""
    status: FormStatus = FormStatus.DRAFT
    questions: List[Dict[str, Any]] = Field(default_factory=list, description="Answer key, in order")
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def is_accepting_responses(self) -> bool:
        return self.status == FormStatus.PUBLISHED


class SubmissionRequest(BaseModel):
    """A respondent's answers to a form"""
    form_id: str
    answers: Dict[Any, Any] = Field(default_factory=dict, description="Payloads keyed by question id")
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ScoredSubmission(BaseModel):
    """A submission together with its computed score"""

    model_config = ConfigDict(populate_by_name=True)

    form_id: str
    answers: Dict[Any, Any]
    metadata: Dict[str, Any] = Field(default_factory=dict)
    score: float = 0.0
    max_score: float = Field(default=0.0, alias="maxScore")
    score_percentage: int = Field(default=0, ge=0, le=100, alias="scorePercentage")
    submitted_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_result(cls, request: SubmissionRequest, result: ScoreResult) -> "ScoredSubmission":
        """Attach a ScoreResult to the request it was computed for"""
        return cls(
            form_id=request.form_id,
            answers=request.answers,
            metadata=request.metadata,
            score=result.score,
            max_score=result.max_score,
            score_percentage=result.score_percentage,
        )

    @property
    def result(self) -> ScoreResult:
        return ScoreResult(
            score=self.score,
            max_score=self.max_score,
            score_percentage=self.score_percentage,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase score keys stored alongside responses"""
        return self.model_dump(by_alias=True, mode="json")
