"""
Participant Repository Port - Interface for conversation membership persistence.
Implementations: conversation_core/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional
from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


class ParticipantRepository(ABC):
    @abstractmethod
    async def add(self, participant: Participant) -> Participant:
        """Insert the row, or overwrite the existing (conversation, user) row."""
        ...

    @abstractmethod
    async def find(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]: ...

    @abstractmethod
    async def mark_left(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        """Set left_at on the row. Returns None when there is no such row."""
        ...
