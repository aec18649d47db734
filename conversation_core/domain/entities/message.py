"""
Message Entity - A single message in a conversation.

Text messages carry a sender; system messages announce membership changes
and have no sender.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId

MESSAGE_TYPES = ("text", "system")
SYSTEM_EVENTS = ("join", "leave")


@dataclass
class Message:
    id: MessageId
    conversation_id: ConversationId
    type: str
    created_at: datetime
    sender_user_id: Optional[UserId] = None
    text: Optional[str] = None
    reply_to_message_id: Optional[MessageId] = None
    system_event: Optional[str] = None
    deleted_at: Optional[datetime] = None
    deleted_by_user_id: Optional[UserId] = None

    def __post_init__(self):
        if self.type not in MESSAGE_TYPES:
            raise ValueError(f"Invalid message type: {self.type}")
        if self.system_event is not None and self.system_event not in SYSTEM_EVENTS:
            raise ValueError(f"Invalid system event: {self.system_event}")

    @classmethod
    def create_text(
        cls,
        conversation_id: ConversationId,
        sender_user_id: UserId,
        text: Optional[str] = None,
        reply_to_message_id: Optional[MessageId] = None,
    ) -> Message:
        """Factory method to create a user-authored message."""
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            type="text",
            created_at=datetime.now(timezone.utc),
            sender_user_id=sender_user_id,
            text=text,
            reply_to_message_id=reply_to_message_id,
        )

    @classmethod
    def create_system(
        cls,
        conversation_id: ConversationId,
        system_event: str,
        text: Optional[str] = None,
    ) -> Message:
        """Factory method to create a sender-less conversation event."""
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            type="system",
            created_at=datetime.now(timezone.utc),
            text=text,
            system_event=system_event,
        )

    def belongs_to(self, conversation_id: ConversationId) -> bool:
        return self.conversation_id.value == conversation_id.value

    def is_sent_by(self, user_id: UserId) -> bool:
        return (
            self.sender_user_id is not None
            and self.sender_user_id.value == user_id.value
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self, deleted_by: UserId) -> None:
        self.deleted_at = datetime.now(timezone.utc)
        self.deleted_by_user_id = deleted_by
