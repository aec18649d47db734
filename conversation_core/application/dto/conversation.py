"""Conversation DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.entities.participant import Participant


class ParticipantDTO(BaseModel):
    id: str
    conversation_id: str
    user_id: str
    role: str
    joined_at: datetime
    left_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, participant: Participant) -> "ParticipantDTO":
        return cls(
            id=participant.id,
            conversation_id=participant.conversation_id.value,
            user_id=participant.user_id.value,
            role=participant.role,
            joined_at=participant.joined_at,
            left_at=participant.left_at,
        )


class ConversationDTO(BaseModel):
    id: str
    kind: str
    name: Optional[str] = None
    created_at: datetime
    participants: list[ParticipantDTO] = []

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            kind=conversation.kind,
            name=conversation.name,
            created_at=conversation.created_at,
            participants=[
                ParticipantDTO.from_entity(p) for p in conversation.participants
            ],
        )
