"""
Pytest configuration and fixtures.

Provides shared fixtures for testing the scoring layer.
"""

import pytest

from formscore_api.core.config import Settings
from formscore_api.models import Form, FormStatus
from formscore_api.repositories import InMemoryFormRepository


@pytest.fixture
def sample_form() -> Form:
    """Published form with one cloze and one categorize question (4 points)"""
    return Form(
        id="form-1",
        title="Quick Quiz",
        status=FormStatus.PUBLISHED,
        questions=[
            {
                "id": "q1",
                "type": "cloze",
                "points": 2,
                "blanks": [{"answer": "brown"}, {"answer": "lazy"}],
            },
            {
                "id": "q2",
                "type": "categorize",
                "points": 2,
                "categories": ["Fruits", "Veggies"],
                "items": ["Apple", "Carrot"],
                "itemAssignments": {"0": 0, "1": 1},
            },
        ],
    )


@pytest.fixture
def draft_form() -> Form:
    """Unpublished form"""
    return Form(
        id="form-draft",
        title="Work in progress",
        status=FormStatus.DRAFT,
        questions=[{"id": "q1", "type": "cloze", "blanks": [{"answer": "x"}]}],
    )


@pytest.fixture
def form_repository(sample_form, draft_form) -> InMemoryFormRepository:
    """Repository holding the sample and draft forms"""
    repo = InMemoryFormRepository()
    repo.add(sample_form)
    repo.add(draft_form)
    return repo


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment"""
    return Settings(_env_file=None, LOG_FORMAT="text", REQUIRE_PUBLISHED_FORM=True)
