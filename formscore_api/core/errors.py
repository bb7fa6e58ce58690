"""
Application exceptions.

The engine itself never raises on irregular data; these cover the cases
the calling layer must surface: a form that cannot be found, a form that
is not accepting responses, and unexpected engine failures.
"""

from typing import Any, Dict, Optional

from .logging import get_logger

logger = get_logger(__name__)


class FormScoreError(Exception):
    """Base exception for scoring-layer errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class FormNotFoundError(FormScoreError):
    """Raised when a form is not found"""

    def __init__(self, form_id: str):
        super().__init__(
            message=f"Form '{form_id}' not found",
            details={"form_id": form_id}
        )


class FormNotAcceptingResponsesError(FormScoreError):
    """Raised when a submission targets a form that is not published"""

    def __init__(self, form_id: str, status: str):
        super().__init__(
            message=f"Form '{form_id}' is not accepting responses (status: {status})",
            details={"form_id": form_id, "status": status}
        )


class ScoringError(FormScoreError):
    """Raised when scoring fails unexpectedly"""

    def __init__(self, form_id: str, error: str):
        super().__init__(
            message=f"Failed to score response for form '{form_id}': {error}",
            details={"form_id": form_id, "error": error}
        )


def error_payload(error: Exception, include_details: bool = True) -> Dict[str, Any]:
    """Create a standardized error payload for the caller to return"""

    error_data: Dict[str, Any] = {
        "error": {
            "type": error.__class__.__name__,
            "message": str(error),
        }
    }

    if isinstance(error, FormScoreError) and include_details:
        error_data["error"]["details"] = error.details

    logger.warning(
        f"Error reported: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            **(error.details if isinstance(error, FormScoreError) else {})
        }
    )

    return error_data
