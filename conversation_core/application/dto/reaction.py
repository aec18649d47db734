"""Reaction DTO."""

from datetime import datetime

from pydantic import BaseModel

from conversation_core.domain.entities.reaction import Reaction


class ReactionDTO(BaseModel):
    id: str
    message_id: str
    user_id: str
    emoji: str
    created_at: datetime

    @classmethod
    def from_entity(cls, reaction: Reaction) -> "ReactionDTO":
        return cls(
            id=reaction.id,
            message_id=reaction.message_id.value,
            user_id=reaction.user_id.value,
            emoji=reaction.emoji,
            created_at=reaction.created_at,
        )
