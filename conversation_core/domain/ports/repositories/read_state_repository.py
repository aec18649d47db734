"""
Read State Repository Port - Interface for per-user read pointers.
Implementations: conversation_core/infrastructure/persistence/
"""

from abc import ABC, abstractmethod

from conversation_core.domain.entities.read_state import ConversationReadState
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


class ReadStateRepository(ABC):
    @abstractmethod
    async def upsert(self, read_state: ConversationReadState) -> ConversationReadState:
        """Create or move the (conversation, user) read pointer."""
        ...

    @abstractmethod
    async def count_unread(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> int:
        """
        Count non-deleted messages created after the user's read pointer,
        ordered by created_at with a stable tie-breaker. Without a pointer
        every message counts.
        """
        ...
