"""Prisma Bookmark Repository Implementation."""

from typing import Optional
from prisma import Prisma
from conversation_core.domain.entities.bookmark import Bookmark, BookmarkedMessage
from conversation_core.domain.ports.repositories import BookmarkRepository
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence.prisma_mappers import (
    to_bookmark,
    to_bookmarked_message,
)


class PrismaBookmarkRepository(BookmarkRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _key(self, message_id: MessageId, user_id: UserId) -> dict:
        return {
            "message_id_user_id": {
                "message_id": message_id.value,
                "user_id": user_id.value,
            }
        }

    async def add(self, bookmark: Bookmark) -> Bookmark:
        record = await self._prisma.bookmark.upsert(
            where=self._key(bookmark.message_id, bookmark.user_id),
            data={
                "create": {
                    "id": bookmark.id,
                    "message_id": bookmark.message_id.value,
                    "user_id": bookmark.user_id.value,
                    "created_at": bookmark.created_at,
                },
                "update": {},
            },
        )
        return to_bookmark(record)

    async def remove(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Bookmark]:
        record = await self._prisma.bookmark.find_unique(
            where=self._key(message_id, user_id)
        )
        if record is None:
            return None
        await self._prisma.bookmark.delete(where={"id": record.id})
        return to_bookmark(record)

    async def list_by_user(self, user_id: UserId) -> list[BookmarkedMessage]:
        records = await self._prisma.bookmark.find_many(
            where={"user_id": user_id.value},
            order={"created_at": "desc"},
            include={"message": True},
        )
        return [to_bookmarked_message(record) for record in records]
