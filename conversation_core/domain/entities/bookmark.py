"""
Bookmark Entity - A user's saved reference to a message.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


@dataclass
class Bookmark:
    id: str
    message_id: MessageId
    user_id: UserId
    created_at: datetime

    @classmethod
    def create(cls, message_id: MessageId, user_id: UserId) -> Bookmark:
        return cls(
            id=str(uuid4()),
            message_id=message_id,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )


@dataclass
class BookmarkedMessage:
    """Read model: a bookmark joined with the message it points to."""

    message_id: MessageId
    conversation_id: ConversationId
    created_at: datetime
    message_created_at: datetime
    text: Optional[str] = None
