"""
Shared pytest fixtures for the scoring engine tests.

This module provides:
- Sample answer-key questions for each question type
- Utilities for testing Pydantic validation
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError


@pytest.fixture
def cloze_question() -> dict[str, Any]:
    """Two-blank cloze question worth 2 points."""
    return {
        "id": "q-cloze",
        "type": "cloze",
        "points": 2,
        "sentence": "The quick ___ fox jumps over the ___ dog",
        "blanks": [{"id": "b1", "answer": "brown"}, {"id": "b2", "answer": "lazy"}],
    }


@pytest.fixture
def comprehension_question() -> dict[str, Any]:
    """Comprehension question with two sub-questions worth 4 points."""
    return {
        "id": "q-comp",
        "type": "comprehension",
        "points": 4,
        "passage": "Water boils at 100 degrees Celsius at sea level.",
        "questions": [
            {"id": "s1", "question": "Boiling point?", "options": ["90", "100", "110"], "correctAnswer": 1},
            {"id": "s2", "question": "Unit?", "options": ["Celsius", "Kelvin"], "correctAnswer": 0},
        ],
    }


@pytest.fixture
def categorize_question() -> dict[str, Any]:
    """Categorize question with three items worth 3 points."""
    return {
        "id": "q-cat",
        "type": "categorize",
        "points": 3,
        "categories": ["Fruits", "Veggies"],
        "items": ["Apple", "Carrot", "Banana"],
        "itemAssignments": {"0": 0, "1": 1, "2": 0},
    }


@pytest.fixture
def answer_key(cloze_question, comprehension_question, categorize_question) -> list[dict[str, Any]]:
    """A form with one question of each type (9 points total)."""
    return [cloze_question, comprehension_question, categorize_question]


@pytest.fixture
def perfect_answers() -> dict[str, Any]:
    """Answers earning full credit on answer_key."""
    return {
        "q-cloze": {"answers": ["brown", "lazy"]},
        "q-comp": {"answers": [2, 1]},
        "q-cat": {"categories": {"Fruits": ["Apple", "Banana"], "Veggies": ["Carrot"]}},
    }


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name (or alias) in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation
