"""List Reactions Query - existence of the message is the only gate."""

from dataclasses import dataclass

from conversation_core.application.common.interfaces import Query, QueryHandler
from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.exceptions import EntityNotFoundError
from conversation_core.domain.ports.repositories import (
    MessageRepository,
    ReactionRepository,
)
from conversation_core.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class ListReactionsQuery(Query[list[Reaction]]):
    message_id: MessageId


class ListReactionsHandler(QueryHandler[list[Reaction]]):
    def __init__(self, msg_repo: MessageRepository, reaction_repo: ReactionRepository):
        self._msg_repo = msg_repo
        self._reaction_repo = reaction_repo

    async def execute(self, query: ListReactionsQuery) -> list[Reaction]:
        message = await self._msg_repo.get_by_id(query.message_id)
        if not message:
            raise EntityNotFoundError("Message")
        return await self._reaction_repo.list_by_message(query.message_id)
