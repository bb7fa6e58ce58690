"""Domain models package"""

from .domain import (
    FormStatus,
    Form,
    SubmissionRequest,
    ScoredSubmission,
)

__all__ = [
    "FormStatus",
    "Form",
    "SubmissionRequest",
    "ScoredSubmission",
]
