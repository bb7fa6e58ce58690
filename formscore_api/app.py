"""
Service wiring.

The owning application calls ``start_scoring_service`` once at start-up:
it configures logging from settings and builds the scoring service over
the given form repository.
"""

from typing import Optional

from .core.config import Settings, settings as default_settings
from .core.logging import configure_logging, get_logger
from .repositories.form_repository import FormRepositoryInterface, get_form_repository
from .services.scoring_service import ScoringService, get_scoring_service

logger = get_logger(__name__)


def start_scoring_service(
    settings: Optional[Settings] = None,
    repository: Optional[FormRepositoryInterface] = None,
) -> ScoringService:
    """
    Configure logging and create the scoring service.

    Args:
        settings: Settings to use (defaults to the environment's)
        repository: Form repository (defaults to the shared in-memory one)
    """
    settings = settings or default_settings
    configure_logging(settings)

    logger.info(
        f"Starting {settings.APP_NAME} v{settings.APP_VERSION}",
        extra_data={"environment": settings.ENVIRONMENT, "log_format": settings.LOG_FORMAT}
    )

    return get_scoring_service(repository or get_form_repository(), settings)
