"""
Participant Entity - Membership of a user in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId

PARTICIPANT_ROLES = ("member", "admin")


@dataclass
class Participant:
    id: str
    conversation_id: ConversationId
    user_id: UserId
    role: str
    joined_at: datetime
    left_at: Optional[datetime] = None

    def __post_init__(self):
        if self.role not in PARTICIPANT_ROLES:
            raise ValueError(
                f"Invalid role: {self.role}. Must be one of {PARTICIPANT_ROLES}."
            )

    @classmethod
    def create(
        cls, conversation_id: ConversationId, user_id: UserId, role: str = "member"
    ) -> Participant:
        return cls(
            id=str(uuid4()),
            conversation_id=conversation_id,
            user_id=user_id,
            role=role,
            joined_at=datetime.now(timezone.utc),
        )

    @property
    def is_active(self) -> bool:
        return self.left_at is None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def leave(self) -> None:
        if self.left_at is None:
            self.left_at = datetime.now(timezone.utc)

    def rejoin(self, role: str) -> None:
        """Reactivate a departed participant in place."""
        if role not in PARTICIPANT_ROLES:
            raise ValueError(f"Invalid role: {role}")
        self.role = role
        self.left_at = None
        self.joined_at = datetime.now(timezone.utc)
