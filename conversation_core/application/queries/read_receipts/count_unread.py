"""Count Unread Query."""

from dataclasses import dataclass

from conversation_core.application.common.interfaces import Query, QueryHandler
from conversation_core.application.common.participant_guard import ParticipantGuard
from conversation_core.domain.ports.repositories import ReadStateRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CountUnreadQuery(Query[int]):
    conversation_id: ConversationId
    user_id: UserId


class CountUnreadHandler(QueryHandler[int]):
    def __init__(self, read_state_repo: ReadStateRepository, guard: ParticipantGuard):
        self._read_state_repo = read_state_repo
        self._guard = guard

    async def execute(self, query: CountUnreadQuery) -> int:
        await self._guard.ensure_active_participant(
            query.conversation_id, query.user_id
        )
        return await self._read_state_repo.count_unread(
            query.conversation_id, query.user_id
        )
