"""
Score data structures.

QuestionScore is the (earned, possible) pair produced for one question;
pairs add up to the form total. ScoreResult is the final, rounded result
stored alongside a response.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SCORE_PRECISION = Decimal("0.01")
PERCENT_PRECISION = Decimal("1")


def round_score(value: float) -> float:
    """
    Round a score to 2 decimal places, halves rounding up.

    The float is converted to Decimal exactly, so the rounding applies to
    the value actually held rather than to its shortest repr.
    """
    return float(Decimal(value).quantize(SCORE_PRECISION, rounding=ROUND_HALF_UP))


def round_percentage(earned: float, possible: float) -> int:
    """
    Percentage of possible points earned, rounded to the nearest integer.

    Returns:
        0 when possible is 0, otherwise round(earned / possible * 100) with
        halves rounding up
    """
    if possible <= 0:
        return 0
    ratio = earned / possible * 100
    return int(Decimal(ratio).quantize(PERCENT_PRECISION, rounding=ROUND_HALF_UP))


class QuestionScore(BaseModel):
    """Points earned and possible for one question (or a running total)"""

    model_config = ConfigDict(frozen=True)

    earned: float = 0.0
    possible: float = 0.0

    def __add__(self, other: QuestionScore) -> QuestionScore:
        if not isinstance(other, QuestionScore):
            return NotImplemented
        return QuestionScore(
            earned=self.earned + other.earned,
            possible=self.possible + other.possible,
        )


class ScoreResult(BaseModel):
    """
    Final score for a response.

    Attributes:
        score: Points earned, rounded to 2 decimals
        max_score: Sum of all questions' points (serialized as maxScore)
        score_percentage: Integer 0-100 (serialized as scorePercentage)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: float = 0.0
    max_score: float = Field(default=0.0, alias="maxScore")
    score_percentage: int = Field(default=0, ge=0, le=100, alias="scorePercentage")

    @classmethod
    def from_total(cls, total: QuestionScore) -> ScoreResult:
        """Round a folded (earned, possible) total into a ScoreResult."""
        return cls(
            score=round_score(total.earned),
            max_score=total.possible,
            score_percentage=round_percentage(total.earned, total.possible),
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for storage with the response.

        Returns:
            ``{"score", "maxScore", "scorePercentage"}``
        """
        return self.model_dump(by_alias=True)
