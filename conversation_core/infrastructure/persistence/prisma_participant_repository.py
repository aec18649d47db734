"""Prisma Participant Repository Implementation."""

from datetime import datetime, timezone
from typing import Optional
from prisma import Prisma
from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.ports.repositories import ParticipantRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence.prisma_mappers import to_participant


def _membership_key(conversation_id: ConversationId, user_id: UserId) -> dict:
    return {
        "conversation_id_user_id": {
            "conversation_id": conversation_id.value,
            "user_id": user_id.value,
        }
    }


class PrismaParticipantRepository(ParticipantRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def add(self, participant: Participant) -> Participant:
        """Upsert on (conversation_id, user_id) so a departed user keeps one row."""
        record = await self._prisma.participant.upsert(
            where=_membership_key(participant.conversation_id, participant.user_id),
            data={
                "create": {
                    "id": participant.id,
                    "conversation_id": participant.conversation_id.value,
                    "user_id": participant.user_id.value,
                    "role": participant.role,
                    "joined_at": participant.joined_at,
                },
                "update": {
                    "role": participant.role,
                    "joined_at": participant.joined_at,
                    "left_at": participant.left_at,
                },
            },
        )
        return to_participant(record)

    async def find(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        record = await self._prisma.participant.find_unique(
            where=_membership_key(conversation_id, user_id)
        )
        return to_participant(record) if record else None

    async def mark_left(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        """Set left_at once; leaving again returns the row unchanged."""
        record = await self._prisma.participant.find_unique(
            where=_membership_key(conversation_id, user_id)
        )
        if record is None:
            return None
        if record.left_at is None:
            record = await self._prisma.participant.update(
                where={"id": record.id},
                data={"left_at": datetime.now(timezone.utc)},
            )
        return to_participant(record) if record else None
