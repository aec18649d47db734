"""
EntityNotFoundError - Raised when a referenced entity does not exist.
Maps to: HTTP 404 Not Found
"""

from conversation_core.domain.exceptions.base import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    status_hint = 404

    def __init__(self, resource: str = "Entity"):
        super().__init__(f"{resource} not found")
        self.resource = resource
