"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by the application handlers and caught by the
presentation layer, which maps each error's status_hint to an HTTP status code.
"""

from conversation_core.domain.exceptions.base import DomainError
from conversation_core.domain.exceptions.entity_not_found import EntityNotFoundError
from conversation_core.domain.exceptions.access_denied import AccessDeniedError
from conversation_core.domain.exceptions.validation_error import (
    DomainValidationError,
    RequiredFieldError,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "RequiredFieldError",
]
