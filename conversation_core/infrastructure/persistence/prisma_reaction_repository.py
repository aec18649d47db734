"""Prisma Reaction Repository Implementation."""

from typing import Optional
from prisma import Prisma
from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.ports.repositories import ReactionRepository
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence.prisma_mappers import to_reaction


def _reaction_key(message_id: MessageId, user_id: UserId, emoji: str) -> dict:
    return {
        "message_id_user_id_emoji": {
            "message_id": message_id.value,
            "user_id": user_id.value,
            "emoji": emoji,
        }
    }


class PrismaReactionRepository(ReactionRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def add(self, reaction: Reaction) -> Reaction:
        """Upsert on the unique (message_id, user_id, emoji) tuple."""
        record = await self._prisma.reaction.upsert(
            where=_reaction_key(reaction.message_id, reaction.user_id, reaction.emoji),
            data={
                "create": {
                    "id": reaction.id,
                    "message_id": reaction.message_id.value,
                    "user_id": reaction.user_id.value,
                    "emoji": reaction.emoji,
                    "created_at": reaction.created_at,
                },
                "update": {},
            },
        )
        return to_reaction(record)

    async def remove(
        self, message_id: MessageId, emoji: str, user_id: UserId
    ) -> Optional[Reaction]:
        record = await self._prisma.reaction.find_unique(
            where=_reaction_key(message_id, user_id, emoji)
        )
        if record is None:
            return None
        await self._prisma.reaction.delete(where={"id": record.id})
        return to_reaction(record)

    async def list_by_message(self, message_id: MessageId) -> list[Reaction]:
        records = await self._prisma.reaction.find_many(
            where={"message_id": message_id.value},
            order={"created_at": "asc"},
        )
        return [to_reaction(record) for record in records]
