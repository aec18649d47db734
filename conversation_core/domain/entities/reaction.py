"""
Reaction Entity - A user's emoji reaction to a message.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


@dataclass
class Reaction:
    id: str
    message_id: MessageId
    user_id: UserId
    emoji: str
    created_at: datetime

    @classmethod
    def create(cls, message_id: MessageId, user_id: UserId, emoji: str) -> Reaction:
        return cls(
            id=str(uuid4()),
            message_id=message_id,
            user_id=user_id,
            emoji=emoji,
            created_at=datetime.now(timezone.utc),
        )

    def matches(self, message_id: MessageId, user_id: UserId, emoji: str) -> bool:
        return (
            self.message_id.value == message_id.value
            and self.user_id.value == user_id.value
            and self.emoji == emoji
        )
