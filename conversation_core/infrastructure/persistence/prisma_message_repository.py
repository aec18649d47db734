"""
Prisma Message Repository Implementation.

Pagination:
- Order: created_at desc, then id desc as the stable tie-breaker
- `before` is used as a Prisma cursor with skip=1 (exclusive)
- A cursor that is unknown or belongs to another conversation yields an empty page

Deletion is soft: deleted_at / deleted_by_user_id are set, the row stays so
replies, reactions and read pointers keep resolving.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from prisma import Prisma
from conversation_core.config.settings import Config
from conversation_core.domain.entities.message import Message
from conversation_core.domain.ports.repositories.message_repository import MessageRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence.prisma_mappers import to_message

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    async def create(self, message: Message) -> Message:
        record = await self._prisma.message.create(
            data={
                "id": message.id.value,
                "conversation_id": message.conversation_id.value,
                "type": message.type,
                "sender_user_id": (
                    message.sender_user_id.value if message.sender_user_id else None
                ),
                "text": message.text,
                "reply_to_message_id": (
                    message.reply_to_message_id.value
                    if message.reply_to_message_id
                    else None
                ),
                "system_event": message.system_event,
                "created_at": message.created_at,
            }
        )
        return to_message(record)

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        """
        Get message by ID.

        Returns:
            Message entity if found, None otherwise
        """
        record = await self._prisma.message.find_unique(where={"id": message_id.value})
        return to_message(record) if record else None

    async def list_page(
        self,
        conversation_id: ConversationId,
        before: Optional[MessageId] = None,
        limit: Optional[int] = None,
    ) -> list[Message]:
        """
        Get one page of messages, newest first.

        Args:
            conversation_id: ConversationId value object
            before: Exclusive cursor; only messages older than it are returned
            limit: Page size, Config.MESSAGE_PAGE_LIMIT when None

        Returns:
            List of Message entities, newest first
        """
        options = {}
        if before is not None:
            cursor = await self._prisma.message.find_unique(where={"id": before.value})
            if cursor is None or cursor.conversation_id != conversation_id.value:
                logger.debug(f"Unknown cursor {before.value} for {conversation_id.value}")
                return []
            options = {"cursor": {"id": before.value}, "skip": 1}

        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order=[{"created_at": "desc"}, {"id": "desc"}],
            take=limit or Config.MESSAGE_PAGE_LIMIT,
            **options,
        )
        return [to_message(record) for record in records]

    async def delete(self, message_id: MessageId, deleted_by: UserId) -> bool:
        """
        Soft-delete message by ID.

        Returns:
            True if marked deleted, False if not found
        """
        record = await self._prisma.message.update(
            where={"id": message_id.value},
            data={
                "deleted_at": datetime.now(timezone.utc),
                "deleted_by_user_id": deleted_by.value,
            },
        )
        return record is not None
