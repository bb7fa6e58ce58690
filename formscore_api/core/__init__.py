"""Core utilities package"""

from .config import settings, get_settings
from .logging import configure_logging, get_logger
from .errors import (
    FormScoreError,
    FormNotFoundError,
    FormNotAcceptingResponsesError,
    ScoringError,
    error_payload,
)

__all__ = [
    "settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "FormScoreError",
    "FormNotFoundError",
    "FormNotAcceptingResponsesError",
    "ScoringError",
    "error_payload",
]
