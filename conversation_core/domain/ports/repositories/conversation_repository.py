"""
Conversation Repository Port - Interface for conversation persistence.
Implementations: conversation_core/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional
from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def create(self, conversation: Conversation) -> Conversation:
        """Persist the conversation together with its initial participant rows."""
        ...

    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def list_for_user(
        self, user_id: UserId, limit: Optional[int] = None
    ) -> list[Conversation]:
        """Conversations the user is or was a participant of, newest first."""
        ...
