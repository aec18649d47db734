"""
AccessDeniedError - Raised when the caller lacks the required relationship
(active participant, admin or sender).
Maps to: HTTP 403 Forbidden
"""

from conversation_core.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to perform an action"""

    status_hint = 403

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"You are not authorized to {action}")
        self.action = action
