"""
Scoring service for submitted responses.

Handles answer-key lookup, the publication gate and engine invocation.
"""

from typing import Any, Dict, Optional
import traceback

from formscore import ScoreResult, score

from ..models.domain import Form, ScoredSubmission, SubmissionRequest
from ..repositories.form_repository import FormRepositoryInterface
from ..core.config import Settings, settings as default_settings
from ..core.errors import FormNotAcceptingResponsesError, ScoringError
from ..core.logging import ScoringLogAdapter, get_logger

logger = get_logger(__name__)


class ScoringService:
    """
    Service for response scoring operations.

    Loads the answer key for a submission and scores it.
    """

    def __init__(
        self,
        repository: FormRepositoryInterface,
        settings: Optional[Settings] = None
    ):
        self.repository = repository
        self.settings = settings or default_settings

        logger.info(
            "ScoringService initialized",
            extra_data={"require_published": self.settings.REQUIRE_PUBLISHED_FORM}
        )

    async def score_submission(self, request: SubmissionRequest) -> ScoredSubmission:
        """
        Score a submission against its form's answer key.

        Args:
            request: Form id, answers keyed by question id, and metadata

        Returns:
            The submission with score, maxScore and scorePercentage attached

        Raises:
            FormNotFoundError: If the form doesn't exist
            FormNotAcceptingResponsesError: If the form is not published
            ScoringError: If scoring fails
        """
        log = logger.bind(form_id=request.form_id)
        log.info("Scoring submission", extra_data={"num_answers": len(request.answers)})

        form = await self.repository.get(request.form_id)

        if self.settings.REQUIRE_PUBLISHED_FORM and not form.is_accepting_responses:
            log.warning("Submission rejected", extra_data={"status": form.status.value})
            raise FormNotAcceptingResponsesError(form.id, form.status.value)

        result = self._score(form, request.answers, log)
        scored = ScoredSubmission.from_result(request, result)

        log.info("Scoring completed", extra_data=result.to_dict())

        return scored

    async def rescore(self, form_id: str, answers: Dict[Any, Any]) -> ScoreResult:
        """
        Score a stored answer set again against the form's current key.

        No publication check is made; the answers were accepted earlier.
        """
        log = logger.bind(form_id=form_id)
        log.info("Rescoring answers", extra_data={"num_answers": len(answers)})

        form = await self.repository.get(form_id)
        result = self._score(form, answers, log)

        log.info("Rescoring completed", extra_data=result.to_dict())
        return result

    def _score(self, form: Form, answers: Dict[Any, Any], log: ScoringLogAdapter) -> ScoreResult:
        """Run the engine, wrapping unexpected failures"""
        try:
            return score(form.questions, answers)
        except Exception as e:
            log.error(
                "Failed to score answers",
                extra_data={"error": str(e), "traceback": traceback.format_exc()}
            )
            raise ScoringError(form.id, str(e)) from e


# Factory function
def get_scoring_service(
    repository: FormRepositoryInterface,
    settings: Optional[Settings] = None
) -> ScoringService:
    """Create scoring service instance"""
    return ScoringService(repository, settings)
