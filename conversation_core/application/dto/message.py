"""Message DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from conversation_core.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    conversation_id: str
    type: str
    sender_user_id: Optional[str] = None
    text: Optional[str] = None
    reply_to_message_id: Optional[str] = None
    system_event: Optional[str] = None
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            type=message.type,
            sender_user_id=(
                message.sender_user_id.value if message.sender_user_id else None
            ),
            # Deleted messages keep their slot in the history but not their content
            text=None if message.is_deleted else message.text,
            reply_to_message_id=(
                message.reply_to_message_id.value
                if message.reply_to_message_id
                else None
            ),
            system_event=message.system_event,
            created_at=message.created_at,
            deleted_at=message.deleted_at,
        )
