"""Bookmark DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from conversation_core.domain.entities.bookmark import Bookmark, BookmarkedMessage


class BookmarkDTO(BaseModel):
    id: str
    message_id: str
    user_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, bookmark: Bookmark) -> "BookmarkDTO":
        return cls(
            id=bookmark.id,
            message_id=bookmark.message_id.value,
            user_id=bookmark.user_id.value,
            created_at=bookmark.created_at,
        )


class BookmarkListItemDTO(BaseModel):
    """
    Bookmark list entry:
    {
        "message_id": "uuid",
        "conversation_id": "uuid",
        "text": "message text",
        "created_at": "bookmark time",
        "message_created_at": "message time"
    }
    """

    message_id: str
    conversation_id: str
    text: Optional[str] = None
    created_at: datetime
    message_created_at: datetime

    @classmethod
    def from_entity(cls, item: BookmarkedMessage) -> "BookmarkListItemDTO":
        return cls(
            message_id=item.message_id.value,
            conversation_id=item.conversation_id.value,
            text=item.text,
            created_at=item.created_at,
            message_created_at=item.message_created_at,
        )
