"""List Conversations Query."""

from dataclasses import dataclass
from typing import Optional

from conversation_core.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from conversation_core.application.common.interfaces import Query, QueryHandler
from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.exceptions import RequiredFieldError
from conversation_core.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: UserId
    limit: Optional[int] = None


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        if not query.user_id:
            raise RequiredFieldError("user_id")
        return await self._conversation_repository.list_for_user(
            query.user_id, query.limit
        )
