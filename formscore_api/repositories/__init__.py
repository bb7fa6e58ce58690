"""Repositories package"""

from .form_repository import (
    FormRepositoryInterface,
    InMemoryFormRepository,
    get_form_repository,
)

__all__ = [
    "FormRepositoryInterface",
    "InMemoryFormRepository",
    "get_form_repository",
]
