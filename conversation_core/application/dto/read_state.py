"""Read receipt DTOs."""

from datetime import datetime

from pydantic import BaseModel

from conversation_core.domain.entities.read_state import ConversationReadState


class ConversationReadDTO(BaseModel):
    id: str
    conversation_id: str
    user_id: str
    last_read_message_id: str
    updated_at: datetime

    @classmethod
    def from_entity(cls, read_state: ConversationReadState) -> "ConversationReadDTO":
        return cls(
            id=read_state.id,
            conversation_id=read_state.conversation_id.value,
            user_id=read_state.user_id.value,
            last_read_message_id=read_state.last_read_message_id.value,
            updated_at=read_state.updated_at,
        )


class UnreadCountDTO(BaseModel):
    unread_count: int
