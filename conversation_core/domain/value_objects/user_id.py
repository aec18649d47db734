"""
UserId Value Object

An empty UserId is allowed so that handlers can report the missing caller
as a RequiredFieldError instead of a bare ValueError.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserId:
    value: str  # user_id, presented as UUID string (empty string = not supplied)

    def __post_init__(self):
        if self.value:
            UUID(self.value)  # Validate UUID format

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        """Return False if empty string (no user supplied)."""
        return bool(self.value)
