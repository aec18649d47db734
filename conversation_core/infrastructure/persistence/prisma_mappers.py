"""
Mapping between Prisma records and domain entities.

- Convert str -> value objects (ConversationId, MessageId, UserId) when reading
- Value objects are unwrapped with `.value` by the repositories when writing
"""

from prisma.models import (
    Bookmark as PrismaBookmark,
    Conversation as PrismaConversation,
    ConversationRead as PrismaConversationRead,
    Message as PrismaMessage,
    Participant as PrismaParticipant,
    Reaction as PrismaReaction,
)

from conversation_core.domain.entities.bookmark import Bookmark, BookmarkedMessage
from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.entities.message import Message
from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.entities.read_state import ConversationReadState
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


def to_participant(record: PrismaParticipant) -> Participant:
    return Participant(
        id=record.id,
        conversation_id=ConversationId(record.conversation_id),
        user_id=UserId(record.user_id),
        role=record.role,
        joined_at=record.joined_at,
        left_at=record.left_at,
    )


def to_conversation(record: PrismaConversation) -> Conversation:
    participants = sorted(record.participants or [], key=lambda p: p.joined_at)
    return Conversation(
        id=ConversationId(record.id),
        kind=record.kind,
        name=record.name,
        created_at=record.created_at,
        participants=[to_participant(p) for p in participants],
    )


def to_message(record: PrismaMessage) -> Message:
    return Message(
        id=MessageId(record.id),
        conversation_id=ConversationId(record.conversation_id),
        type=record.type,
        created_at=record.created_at,
        sender_user_id=UserId(record.sender_user_id) if record.sender_user_id else None,
        text=record.text,
        reply_to_message_id=(
            MessageId(record.reply_to_message_id)
            if record.reply_to_message_id
            else None
        ),
        system_event=record.system_event,
        deleted_at=record.deleted_at,
        deleted_by_user_id=(
            UserId(record.deleted_by_user_id) if record.deleted_by_user_id else None
        ),
    )


def to_reaction(record: PrismaReaction) -> Reaction:
    return Reaction(
        id=record.id,
        message_id=MessageId(record.message_id),
        user_id=UserId(record.user_id),
        emoji=record.emoji,
        created_at=record.created_at,
    )


def to_bookmark(record: PrismaBookmark) -> Bookmark:
    return Bookmark(
        id=record.id,
        message_id=MessageId(record.message_id),
        user_id=UserId(record.user_id),
        created_at=record.created_at,
    )


def to_bookmarked_message(record: PrismaBookmark) -> BookmarkedMessage:
    """Requires the bookmark to be loaded with include={"message": True}."""
    message = record.message
    return BookmarkedMessage(
        message_id=MessageId(record.message_id),
        conversation_id=ConversationId(message.conversation_id),
        text=None if message.deleted_at else message.text,
        created_at=record.created_at,
        message_created_at=message.created_at,
    )


def to_read_state(record: PrismaConversationRead) -> ConversationReadState:
    return ConversationReadState(
        id=record.id,
        conversation_id=ConversationId(record.conversation_id),
        user_id=UserId(record.user_id),
        last_read_message_id=MessageId(record.last_read_message_id),
        updated_at=record.updated_at,
    )
