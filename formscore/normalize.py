"""
Normalization helpers shared by the question evaluators.

Every comparison the engine makes goes through one of these functions,
so the matching rules (case, whitespace, option numbering) live in a
single place.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_text(value: Any) -> str:
    """
    Normalize a free-text answer or category name for comparison.

    Args:
        value: Raw value (usually a string; None is treated as empty)

    Returns:
        The value as a string, with surrounding whitespace removed and lowercased
    """
    if value is None:
        return ""
    return str(value).strip().lower()


def key_to_submission_index(correct_answer: Any) -> Any:
    """
    Convert an answer-key option index to the numbering used by submissions.

    Answer keys store the correct option 0-based, while submitted answers
    number options from 1. Non-negative numbers are shifted by one; any
    other value is returned unchanged so that a malformed key simply never
    matches.

    Examples:
        >>> key_to_submission_index(0)
        1
        >>> key_to_submission_index(-1)
        -1
    """
    if isinstance(correct_answer, bool):
        return correct_answer
    if isinstance(correct_answer, (int, float)) and correct_answer >= 0:
        return correct_answer + 1
    return correct_answer


def parse_option_index(value: Any) -> Optional[int]:
    """
    Parse a submitted option index.

    Integers pass through, finite floats are truncated, and strings are
    read up to the end of their leading (optionally signed) integer, so
    "2", " 2 " and "2nd" all parse to 2.

    Returns:
        The parsed integer, or None when the value holds no integer
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def as_index(value: Any) -> Optional[int]:
    """Coerce an index stored in a JSON document (int, integral float or digit string)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def invert_placements(provided_map: Mapping[str, Any]) -> dict[str, str]:
    """
    Invert a category -> item labels mapping into item label -> category.

    When a label is listed under more than one category, the first category
    (in mapping order) wins. Entries whose value is not a list are ignored.
    """
    placements: dict[str, str] = {}
    for category, labels in provided_map.items():
        if not isinstance(labels, (list, tuple)):
            continue
        for label in labels:
            if isinstance(label, str):
                placements.setdefault(label, category)
    return placements
