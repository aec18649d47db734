import pytest

from conversation_core.application.commands.conversations import (
    CreateConversationCommand,
)
from conversation_core.application.commands.messages import (
    DeleteMessageCommand,
    SendMessageCommand,
)
from conversation_core.application.commands.read_receipts import (
    MarkConversationReadCommand,
)
from conversation_core.application.queries.read_receipts import CountUnreadQuery
from conversation_core.domain.exceptions import AccessDeniedError, DomainValidationError
from conversation_core.domain.value_objects.message_id import MessageId


@pytest.fixture()
def direct_chat(handlers):
    """Factory: a direct conversation between the given users."""

    async def _create(*users):
        return await handlers.create_conversation.execute(
            CreateConversationCommand(kind="direct", participant_ids=list(users))
        )

    return _create


async def _send(handlers, conversation, sender, text="hi"):
    return await handlers.send_message.execute(
        SendMessageCommand(conversation_id=conversation.id, sender_id=sender, text=text)
    )


async def _unread(handlers, conversation, user):
    return await handlers.count_unread.execute(
        CountUnreadQuery(conversation_id=conversation.id, user_id=user)
    )


@pytest.mark.asyncio
async def test_everything_is_unread_without_read_state(
    handlers, direct_chat, new_user_id
):
    alice, bob = new_user_id(), new_user_id()
    conversation = await direct_chat(alice, bob)
    for i in range(3):
        await _send(handlers, conversation, alice, text=str(i))

    assert await _unread(handlers, conversation, bob) == 3


@pytest.mark.asyncio
async def test_unread_counts_only_messages_after_pointer(
    handlers, direct_chat, new_user_id
):
    alice, bob = new_user_id(), new_user_id()
    conversation = await direct_chat(alice, bob)
    messages = [await _send(handlers, conversation, alice, text=str(i)) for i in range(4)]

    read = await handlers.mark_read.execute(
        MarkConversationReadCommand(
            conversation_id=conversation.id,
            user_id=bob,
            last_read_message_id=messages[1].id,
        )
    )

    assert read.last_read_message_id == messages[1].id
    assert await _unread(handlers, conversation, bob) == 2


@pytest.mark.asyncio
async def test_marking_read_twice_moves_the_same_row(
    handlers, direct_chat, new_user_id
):
    alice, bob = new_user_id(), new_user_id()
    conversation = await direct_chat(alice, bob)
    first = await _send(handlers, conversation, alice)
    second = await _send(handlers, conversation, alice)

    earlier = await handlers.mark_read.execute(
        MarkConversationReadCommand(
            conversation_id=conversation.id, user_id=bob, last_read_message_id=first.id
        )
    )
    later = await handlers.mark_read.execute(
        MarkConversationReadCommand(
            conversation_id=conversation.id, user_id=bob, last_read_message_id=second.id
        )
    )

    assert later.id == earlier.id
    assert await _unread(handlers, conversation, bob) == 0


@pytest.mark.asyncio
async def test_deleted_messages_are_not_unread(handlers, direct_chat, new_user_id):
    alice, bob = new_user_id(), new_user_id()
    conversation = await direct_chat(alice, bob)
    await _send(handlers, conversation, alice)
    doomed = await _send(handlers, conversation, alice)
    await handlers.delete_message.execute(
        DeleteMessageCommand(message_id=doomed.id, request_user_id=alice)
    )

    assert await _unread(handlers, conversation, bob) == 1


@pytest.mark.asyncio
async def test_pointer_from_other_conversation_is_rejected(
    handlers, direct_chat, new_user_id
):
    alice = new_user_id()
    first = await direct_chat(alice)
    second = await direct_chat(alice)
    foreign = await _send(handlers, first, alice)

    with pytest.raises(DomainValidationError) as exc_info:
        await handlers.mark_read.execute(
            MarkConversationReadCommand(
                conversation_id=second.id,
                user_id=alice,
                last_read_message_id=foreign.id,
            )
        )
    assert exc_info.value.status_hint == 400


@pytest.mark.asyncio
async def test_unknown_pointer_is_rejected(handlers, direct_chat, new_user_id):
    alice = new_user_id()
    conversation = await direct_chat(alice)

    with pytest.raises(DomainValidationError):
        await handlers.mark_read.execute(
            MarkConversationReadCommand(
                conversation_id=conversation.id,
                user_id=alice,
                last_read_message_id=MessageId.generate(),
            )
        )


@pytest.mark.asyncio
async def test_outsider_cannot_read_or_count(handlers, direct_chat, new_user_id):
    alice, mallory = new_user_id(), new_user_id()
    conversation = await direct_chat(alice)
    message = await _send(handlers, conversation, alice)

    with pytest.raises(AccessDeniedError):
        await handlers.mark_read.execute(
            MarkConversationReadCommand(
                conversation_id=conversation.id,
                user_id=mallory,
                last_read_message_id=message.id,
            )
        )
    with pytest.raises(AccessDeniedError):
        await _unread(handlers, conversation, mallory)
