"""
Message Repository Port - Interface for message persistence.
Implementations: conversation_core/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional

from conversation_core.domain.entities.message import Message
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def create(self, message: Message) -> Message: ...

    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def list_page(
        self,
        conversation_id: ConversationId,
        before: Optional[MessageId] = None,
        limit: Optional[int] = None,
    ) -> list[Message]:
        """
        Newest-first page of messages.

        `before` is an exclusive cursor (a message id); `limit=None` means the
        repository default page size.
        """
        ...

    @abstractmethod
    async def delete(self, message_id: MessageId, deleted_by: UserId) -> bool: ...
