"""
Conversation Entity - A direct or group chat between users.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId

CONVERSATION_KINDS = ("direct", "group")


@dataclass
class Conversation:
    id: ConversationId
    kind: str
    created_at: datetime
    name: Optional[str] = None
    participants: list[Participant] = field(default_factory=list)

    def __post_init__(self):
        if self.kind not in CONVERSATION_KINDS:
            raise ValueError(
                f"Invalid conversation kind: {self.kind}. Must be one of {CONVERSATION_KINDS}."
            )

    @classmethod
    def create(
        cls, kind: str, participant_ids: list[UserId], name: Optional[str] = None
    ) -> Conversation:
        """Factory method: new conversation with one member row per distinct user."""
        conversation_id = ConversationId.generate()
        now = datetime.now(timezone.utc)
        participants = []
        seen = set()
        for user_id in participant_ids:
            if user_id.value in seen:
                continue
            seen.add(user_id.value)
            participants.append(
                Participant.create(conversation_id=conversation_id, user_id=user_id)
            )
        return cls(
            id=conversation_id,
            kind=kind,
            name=name,
            created_at=now,
            participants=participants,
        )
