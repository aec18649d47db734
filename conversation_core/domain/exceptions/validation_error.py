"""
DomainValidationError - Raised when a value fails a cross-entity consistency check.
RequiredFieldError - Raised when a mandatory field is missing or empty.
Maps to: HTTP 400 Bad Request
"""

from conversation_core.domain.exceptions.base import DomainError


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    status_hint = 400


class RequiredFieldError(DomainValidationError):
    """Exception raised when a mandatory field was not supplied."""

    def __init__(self, field: str):
        super().__init__(f"{field} is required")
        self.field = field
