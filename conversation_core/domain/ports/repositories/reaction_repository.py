"""
Reaction Repository Port - Interface for reaction persistence.
Implementations: conversation_core/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional

from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


class ReactionRepository(ABC):
    @abstractmethod
    async def add(self, reaction: Reaction) -> Reaction:
        """Store the reaction; an identical (message, user, emoji) returns the stored one."""
        ...

    @abstractmethod
    async def remove(
        self, message_id: MessageId, emoji: str, user_id: UserId
    ) -> Optional[Reaction]: ...

    @abstractmethod
    async def list_by_message(self, message_id: MessageId) -> list[Reaction]: ...
