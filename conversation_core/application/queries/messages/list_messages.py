"""
ListMessages Query - Paginated conversation history.

Only active participants may read history. Pages are newest first; `before`
is an exclusive message-id cursor.
"""

from dataclasses import dataclass
from typing import Optional

from conversation_core.application.common.interfaces import Query, QueryHandler
from conversation_core.application.common.participant_guard import ParticipantGuard
from conversation_core.domain.entities.message import Message
from conversation_core.domain.ports.repositories import MessageRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


def normalize_page_limit(limit: Optional[int], max_limit: int) -> Optional[int]:
    """
    None for "repository default" when the limit is missing, non-numeric or
    not positive; otherwise the limit clamped to max_limit.
    """
    if limit is None or isinstance(limit, bool):
        return None
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        return None
    if limit <= 0:
        return None
    return min(limit, max_limit)


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    conversation_id: ConversationId
    user_id: UserId
    before: Optional[MessageId] = None
    limit: Optional[int] = None


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(
        self, msg_repo: MessageRepository, guard: ParticipantGuard, max_limit: int
    ):
        self._msg_repo = msg_repo
        self._guard = guard
        self._max_limit = max_limit

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        """
        Raises:
            AccessDeniedError: If the caller is not an active participant
        """
        await self._guard.ensure_active_participant(
            query.conversation_id, query.user_id
        )
        return await self._msg_repo.list_page(
            query.conversation_id,
            before=query.before,
            limit=normalize_page_limit(query.limit, self._max_limit),
        )
