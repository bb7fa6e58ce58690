"""
Logging for the scoring service.

Records carry an ``extra_data`` dict. Score fields in it (form id, score,
maxScore, scorePercentage) are reported under one ``scoring`` key so a
submission's outcome can be pulled out of the log stream as a unit.
"""

import sys
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings, settings as default_settings

# extra_data keys reported as the scoring outcome
SCORING_FIELDS = ("form_id", "score", "maxScore", "scorePercentage")

# Loggers owned by this project; configure_logging never touches the root logger
PROJECT_LOGGERS = ("formscore", "formscore_api")


def split_scoring_fields(extra_data: Dict[str, Any]) -> tuple:
    """Split extra_data into (scoring fields, remaining context)"""
    scoring = {k: v for k, v in extra_data.items() if k in SCORING_FIELDS}
    context = {k: v for k, v in extra_data.items() if k not in SCORING_FIELDS}
    return scoring, context


class ScoringJSONFormatter(logging.Formatter):
    """One JSON object per record, score fields grouped under ``scoring``"""

    def format(self, record: logging.LogRecord) -> str:
        scoring, context = split_scoring_fields(getattr(record, "extra_data", {}))
        entry: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        if scoring:
            entry["scoring"] = scoring
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ScoringTextFormatter(logging.Formatter):
    """Console formatter; appends a ``[form=... score=a/b (p%)]`` tag"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        scoring, _ = split_scoring_fields(getattr(record, "extra_data", {}))
        tag = []
        if "form_id" in scoring:
            tag.append(f"form={scoring['form_id']}")
        if "score" in scoring and "maxScore" in scoring:
            outcome = f"score={scoring['score']}/{scoring['maxScore']}"
            if "scorePercentage" in scoring:
                outcome += f" ({scoring['scorePercentage']}%)"
            tag.append(outcome)
        return f"{line} [{' '.join(tag)}]" if tag else line


def configure_logging(settings: Optional[Settings] = None) -> list:
    """
    Attach handlers to the project loggers according to settings.

    Called once at service start-up. Calling it again replaces the
    handlers it installed before.

    Returns:
        The installed handlers
    """
    settings = settings or default_settings
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter = ScoringJSONFormatter() if settings.LOG_FORMAT == "json" else ScoringTextFormatter()

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)

    for name in PROJECT_LOGGERS:
        project_logger = logging.getLogger(name)
        for old in project_logger.handlers[:]:
            project_logger.removeHandler(old)
            old.close()
        for handler in handlers:
            project_logger.addHandler(handler)
        project_logger.setLevel(level)
        project_logger.propagate = False

    return handlers


class ScoringLogAdapter(logging.LoggerAdapter):
    """
    Adapter that merges bound context with per-call ``extra_data``.

    ``bind`` returns a new adapter; the original keeps its context.
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        kwargs.setdefault("extra", {})["extra_data"] = {**self.extra, **extra_data}
        return msg, kwargs

    def bind(self, **context) -> "ScoringLogAdapter":
        return ScoringLogAdapter(self.logger, {**self.extra, **context})


def get_logger(name: str, **context) -> ScoringLogAdapter:
    """Get a logger, optionally bound to permanent context"""
    return ScoringLogAdapter(logging.getLogger(name), context)
