"""
Prisma Conversation Repository Implementation.

- Implements ConversationRepository port from domain layer
- The conversation and its initial participants are written with one nested create
- Reads always include the participant rows
"""

from typing import Optional
from prisma import Prisma
from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.ports.repositories import ConversationRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence.prisma_mappers import to_conversation


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def create(self, conversation: Conversation) -> Conversation:
        """Create conversation and participant rows in one statement."""
        record = await self._prisma.conversation.create(
            data={
                "id": conversation.id.value,
                "kind": conversation.kind,
                "name": conversation.name,
                "created_at": conversation.created_at,
                "participants": {
                    "create": [
                        {
                            "id": p.id,
                            "user_id": p.user_id.value,
                            "role": p.role,
                            "joined_at": p.joined_at,
                        }
                        for p in conversation.participants
                    ]
                },
            },
            include={"participants": True},
        )
        return to_conversation(record)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Get conversation by ID."""
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value},
            include={"participants": True},
        )
        return to_conversation(record) if record else None

    async def list_for_user(
        self, user_id: UserId, limit: Optional[int] = None
    ) -> list[Conversation]:
        """Conversations the user is or was part of, ordered by created_at desc."""
        records = await self._prisma.conversation.find_many(
            where={"participants": {"some": {"user_id": user_id.value}}},
            order={"created_at": "desc"},
            take=limit,
            include={"participants": True},
        )
        return [to_conversation(record) for record in records]
