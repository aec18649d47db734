"""
In-memory repository implementations.

All repositories share one InMemoryChatStore, which plays the role of the
database: entities are copied in and out so that callers never hold live
references to stored state. Messages get an insertion sequence number that
breaks created_at ties, giving a stable newest-first order.
"""

import copy
import logging
from datetime import datetime, timezone
from typing import Optional

from conversation_core.config.settings import Config
from conversation_core.domain.entities.bookmark import Bookmark, BookmarkedMessage
from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.entities.message import Message
from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.entities.read_state import ConversationReadState
from conversation_core.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
    ReadStateRepository,
)
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class InMemoryChatStore:
    """Process-local tables keyed the way the PostgreSQL schema is indexed."""

    def __init__(self):
        self.conversations: dict[str, Conversation] = {}
        self.participants: dict[tuple[str, str], Participant] = {}
        self.messages: dict[str, Message] = {}
        self.reactions: list[Reaction] = []
        self.bookmarks: dict[tuple[str, str], Bookmark] = {}
        self.read_states: dict[tuple[str, str], ConversationReadState] = {}
        self._sequence = 0
        self._order: dict[str, int] = {}

    def next_sequence(self, key: str) -> int:
        self._sequence += 1
        self._order[key] = self._sequence
        return self._sequence

    def order_key(self, entity_id: str, created_at: datetime) -> tuple[datetime, int]:
        return created_at, self._order.get(entity_id, 0)

    def message_key(self, message: Message) -> tuple[datetime, int]:
        return self.order_key(message.id.value, message.created_at)

    def participants_of(self, conversation_id: str) -> list[Participant]:
        rows = [
            p
            for (conv_id, _), p in self.participants.items()
            if conv_id == conversation_id
        ]
        rows.sort(key=lambda p: self.order_key(p.id, p.joined_at))
        return [copy.deepcopy(p) for p in rows]

    def messages_of(self, conversation_id: str) -> list[Message]:
        """Messages of a conversation, oldest first."""
        rows = [m for m in self.messages.values() if m.conversation_id.value == conversation_id]
        rows.sort(key=self.message_key)
        return rows


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    def _with_participants(self, conversation: Conversation) -> Conversation:
        result = copy.deepcopy(conversation)
        result.participants = self._store.participants_of(conversation.id.value)
        return result

    async def create(self, conversation: Conversation) -> Conversation:
        stored = copy.deepcopy(conversation)
        stored.participants = []
        self._store.conversations[conversation.id.value] = stored
        self._store.next_sequence(conversation.id.value)
        for participant in conversation.participants:
            key = (conversation.id.value, participant.user_id.value)
            self._store.participants[key] = copy.deepcopy(participant)
            self._store.next_sequence(participant.id)
        return self._with_participants(stored)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        conversation = self._store.conversations.get(conversation_id.value)
        return self._with_participants(conversation) if conversation else None

    async def list_for_user(
        self, user_id: UserId, limit: Optional[int] = None
    ) -> list[Conversation]:
        conversation_ids = {
            conv_id
            for (conv_id, member_id) in self._store.participants
            if member_id == user_id.value
        }
        conversations = [
            self._store.conversations[conv_id]
            for conv_id in conversation_ids
            if conv_id in self._store.conversations
        ]
        conversations.sort(
            key=lambda c: self._store.order_key(c.id.value, c.created_at),
            reverse=True,
        )
        if limit:
            conversations = conversations[:limit]
        return [self._with_participants(c) for c in conversations]


class InMemoryParticipantRepository(ParticipantRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def add(self, participant: Participant) -> Participant:
        key = (participant.conversation_id.value, participant.user_id.value)
        existing = self._store.participants.get(key)
        stored = copy.deepcopy(participant)
        if existing is not None:
            # Keep the row identity, overwrite its state
            stored.id = existing.id
        else:
            self._store.next_sequence(stored.id)
        self._store.participants[key] = stored
        return copy.deepcopy(stored)

    async def find(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        participant = self._store.participants.get(
            (conversation_id.value, user_id.value)
        )
        return copy.deepcopy(participant) if participant else None

    async def mark_left(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        participant = self._store.participants.get(
            (conversation_id.value, user_id.value)
        )
        if participant is None:
            return None
        participant.leave()
        return copy.deepcopy(participant)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def create(self, message: Message) -> Message:
        self._store.messages[message.id.value] = copy.deepcopy(message)
        self._store.next_sequence(message.id.value)
        return copy.deepcopy(message)

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        message = self._store.messages.get(message_id.value)
        return copy.deepcopy(message) if message else None

    async def list_page(
        self,
        conversation_id: ConversationId,
        before: Optional[MessageId] = None,
        limit: Optional[int] = None,
    ) -> list[Message]:
        rows = self._store.messages_of(conversation_id.value)
        if before is not None:
            cursor = self._store.messages.get(before.value)
            if cursor is None or not cursor.belongs_to(conversation_id):
                return []
            cursor_key = self._store.message_key(cursor)
            rows = [m for m in rows if self._store.message_key(m) < cursor_key]
        rows.reverse()
        return [copy.deepcopy(m) for m in rows[: limit or Config.MESSAGE_PAGE_LIMIT]]

    async def delete(self, message_id: MessageId, deleted_by: UserId) -> bool:
        message = self._store.messages.get(message_id.value)
        if message is None:
            return False
        message.mark_deleted(deleted_by)
        return True


class InMemoryReactionRepository(ReactionRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def add(self, reaction: Reaction) -> Reaction:
        for existing in self._store.reactions:
            if existing.matches(reaction.message_id, reaction.user_id, reaction.emoji):
                return copy.deepcopy(existing)
        self._store.reactions.append(copy.deepcopy(reaction))
        return copy.deepcopy(reaction)

    async def remove(
        self, message_id: MessageId, emoji: str, user_id: UserId
    ) -> Optional[Reaction]:
        for index, existing in enumerate(self._store.reactions):
            if existing.matches(message_id, user_id, emoji):
                return self._store.reactions.pop(index)
        return None

    async def list_by_message(self, message_id: MessageId) -> list[Reaction]:
        return [
            copy.deepcopy(r)
            for r in self._store.reactions
            if r.message_id.value == message_id.value
        ]


class InMemoryReadStateRepository(ReadStateRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def upsert(self, read_state: ConversationReadState) -> ConversationReadState:
        key = (read_state.conversation_id.value, read_state.user_id.value)
        existing = self._store.read_states.get(key)
        stored = copy.deepcopy(read_state)
        if existing is not None:
            stored.id = existing.id
        stored.updated_at = datetime.now(timezone.utc)
        self._store.read_states[key] = stored
        return copy.deepcopy(stored)

    async def count_unread(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> int:
        rows = [
            m for m in self._store.messages_of(conversation_id.value) if not m.is_deleted
        ]
        read_state = self._store.read_states.get((conversation_id.value, user_id.value))
        pointer = (
            self._store.messages.get(read_state.last_read_message_id.value)
            if read_state
            else None
        )
        if pointer is None:
            return len(rows)
        pointer_key = self._store.message_key(pointer)
        return sum(1 for m in rows if self._store.message_key(m) > pointer_key)


class InMemoryBookmarkRepository(BookmarkRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def add(self, bookmark: Bookmark) -> Bookmark:
        key = (bookmark.message_id.value, bookmark.user_id.value)
        existing = self._store.bookmarks.get(key)
        if existing is not None:
            return copy.deepcopy(existing)
        self._store.bookmarks[key] = copy.deepcopy(bookmark)
        self._store.next_sequence(bookmark.id)
        return copy.deepcopy(bookmark)

    async def remove(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Bookmark]:
        return self._store.bookmarks.pop((message_id.value, user_id.value), None)

    async def list_by_user(self, user_id: UserId) -> list[BookmarkedMessage]:
        bookmarks = [b for (_, owner), b in self._store.bookmarks.items() if owner == user_id.value]
        bookmarks.sort(
            key=lambda b: self._store.order_key(b.id, b.created_at), reverse=True
        )
        items = []
        for bookmark in bookmarks:
            message = self._store.messages.get(bookmark.message_id.value)
            if message is None:
                logger.warning(
                    f"Bookmark {bookmark.id} points to missing message "
                    f"{bookmark.message_id.value}"
                )
                continue
            items.append(
                BookmarkedMessage(
                    message_id=bookmark.message_id,
                    conversation_id=message.conversation_id,
                    text=None if message.is_deleted else message.text,
                    created_at=bookmark.created_at,
                    message_created_at=message.created_at,
                )
            )
        return items
