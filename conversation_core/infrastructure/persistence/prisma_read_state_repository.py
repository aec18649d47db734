"""
Prisma Read State Repository Implementation.

Unread messages are the non-deleted messages strictly after the read pointer in
(created_at, id) order.
"""

from prisma import Prisma
from conversation_core.domain.entities.read_state import ConversationReadState
from conversation_core.domain.ports.repositories import ReadStateRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence.prisma_mappers import to_read_state


class PrismaReadStateRepository(ReadStateRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def upsert(self, read_state: ConversationReadState) -> ConversationReadState:
        record = await self._prisma.conversationread.upsert(
            where={
                "conversation_id_user_id": {
                    "conversation_id": read_state.conversation_id.value,
                    "user_id": read_state.user_id.value,
                }
            },
            data={
                "create": {
                    "id": read_state.id,
                    "conversation_id": read_state.conversation_id.value,
                    "user_id": read_state.user_id.value,
                    "last_read_message_id": read_state.last_read_message_id.value,
                },
                "update": {
                    "last_read_message_id": read_state.last_read_message_id.value,
                },
            },
        )
        return to_read_state(record)

    async def count_unread(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> int:
        where = {"conversation_id": conversation_id.value, "deleted_at": None}

        read_state = await self._prisma.conversationread.find_unique(
            where={
                "conversation_id_user_id": {
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                }
            }
        )
        pointer = None
        if read_state is not None:
            pointer = await self._prisma.message.find_unique(
                where={"id": read_state.last_read_message_id}
            )
        if pointer is not None:
            where["OR"] = [
                {"created_at": {"gt": pointer.created_at}},
                {"created_at": pointer.created_at, "id": {"gt": pointer.id}},
            ]
        return await self._prisma.message.count(where=where)
