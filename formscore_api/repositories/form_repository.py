"""
Form repository for answer-key access.

Implements the Repository pattern for reading forms. Storage belongs to
the owning application; the in-memory implementation backs tests and
local wiring.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..models.domain import Form
from ..core.errors import FormNotFoundError
from ..core.logging import get_logger

logger = get_logger(__name__)


class FormRepositoryInterface(ABC):
    """Abstract interface for form repository"""

    @abstractmethod
    async def get(self, form_id: str) -> Form:
        """Get form by ID"""
        pass

    @abstractmethod
    async def exists(self, form_id: str) -> bool:
        """Check if form exists"""
        pass


class InMemoryFormRepository(FormRepositoryInterface):
    """Dict-backed form repository"""

    def __init__(self, forms: Optional[Dict[str, Form]] = None):
        self._forms: Dict[str, Form] = dict(forms or {})

        logger.info(
            "Initialized InMemoryFormRepository",
            extra_data={"count": len(self._forms)}
        )

    def add(self, form: Form) -> Form:
        """Add or replace a form"""
        self._forms[form.id] = form
        logger.debug(
            "Form added",
            extra_data={"form_id": form.id, "questions": len(form.questions)}
        )
        return form

    async def get(self, form_id: str) -> Form:
        """Get form by ID"""
        form = self._forms.get(form_id)

        if form is None:
            logger.warning(
                "Form not found",
                extra_data={"form_id": form_id}
            )
            raise FormNotFoundError(form_id)

        return form

    async def exists(self, form_id: str) -> bool:
        """Check if form exists"""
        return form_id in self._forms


# Singleton instance
_form_repository: Optional[InMemoryFormRepository] = None


def get_form_repository() -> InMemoryFormRepository:
    """Get form repository instance (singleton)"""
    global _form_repository

    if _form_repository is None:
        _form_repository = InMemoryFormRepository()

    return _form_repository
