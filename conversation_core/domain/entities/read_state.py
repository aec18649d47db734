"""
ConversationReadState Entity - Per-user read pointer within a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


@dataclass
class ConversationReadState:
    id: str
    conversation_id: ConversationId
    user_id: UserId
    last_read_message_id: MessageId
    updated_at: datetime

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        user_id: UserId,
        last_read_message_id: MessageId,
    ) -> ConversationReadState:
        return cls(
            id=str(uuid4()),
            conversation_id=conversation_id,
            user_id=user_id,
            last_read_message_id=last_read_message_id,
            updated_at=datetime.now(timezone.utc),
        )
