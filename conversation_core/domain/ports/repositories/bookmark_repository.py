"""
Bookmark Repository Port - Interface for bookmark persistence.
Implementations: conversation_core/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional

from conversation_core.domain.entities.bookmark import Bookmark, BookmarkedMessage
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


class BookmarkRepository(ABC):
    @abstractmethod
    async def add(self, bookmark: Bookmark) -> Bookmark: ...

    @abstractmethod
    async def remove(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Bookmark]: ...

    @abstractmethod
    async def list_by_user(self, user_id: UserId) -> list[BookmarkedMessage]: ...
