"""Get Conversation Query - conversation detail with its participants."""

from dataclasses import dataclass

from conversation_core.application.common.interfaces import Query, QueryHandler
from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.exceptions import EntityNotFoundError
from conversation_core.domain.ports.repositories import ConversationRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: ConversationId


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: GetConversationQuery) -> Conversation:
        conversation = await self._conversation_repository.get_by_id(
            query.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError("Conversation")
        return conversation
