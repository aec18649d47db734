import pytest

from conversation_core.application.commands.bookmarks import (
    AddBookmarkCommand,
    RemoveBookmarkCommand,
)
from conversation_core.application.commands.conversations import (
    CreateConversationCommand,
    MarkParticipantLeftCommand,
)
from conversation_core.application.commands.messages import (
    DeleteMessageCommand,
    SendMessageCommand,
)
from conversation_core.application.commands.reactions import (
    AddReactionCommand,
    RemoveReactionCommand,
)
from conversation_core.application.queries.bookmarks import ListBookmarksQuery
from conversation_core.application.queries.reactions import ListReactionsQuery
from conversation_core.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    RequiredFieldError,
)
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId


@pytest.fixture()
def chat(handlers, new_user_id):
    """Factory: (conversation, alice, bob, message from alice)."""

    async def _create(text="hello"):
        alice, bob = new_user_id(), new_user_id()
        conversation = await handlers.create_conversation.execute(
            CreateConversationCommand(kind="direct", participant_ids=[alice, bob])
        )
        message = await handlers.send_message.execute(
            SendMessageCommand(
                conversation_id=conversation.id, sender_id=alice, text=text
            )
        )
        return conversation, alice, bob, message

    return _create


# ==================== REACTIONS ====================


@pytest.mark.asyncio
async def test_thumbs_up_scenario(handlers, chat):
    _, _, bob, message = await chat()

    await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji="👍")
    )
    reactions = await handlers.list_reactions.execute(
        ListReactionsQuery(message_id=message.id)
    )

    assert len(reactions) == 1
    assert reactions[0].user_id == bob
    assert reactions[0].emoji == "👍"


@pytest.mark.asyncio
async def test_identical_reaction_is_stored_once(handlers, chat):
    _, alice, bob, message = await chat()

    first = await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji="👍")
    )
    again = await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji="👍")
    )
    await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji="🎉")
    )
    await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=alice, emoji="👍")
    )

    assert again.id == first.id
    reactions = await handlers.list_reactions.execute(
        ListReactionsQuery(message_id=message.id)
    )
    assert len(reactions) == 3


@pytest.mark.asyncio
async def test_blank_emoji_is_required(handlers, chat):
    _, _, bob, message = await chat()

    with pytest.raises(RequiredFieldError) as exc_info:
        await handlers.add_reaction.execute(
            AddReactionCommand(message_id=message.id, user_id=bob, emoji="  ")
        )
    assert exc_info.value.message == "emoji is required"


@pytest.mark.asyncio
async def test_reaction_on_missing_message(handlers, new_user_id):
    with pytest.raises(EntityNotFoundError):
        await handlers.add_reaction.execute(
            AddReactionCommand(
                message_id=MessageId.generate(), user_id=new_user_id(), emoji="👍"
            )
        )
    with pytest.raises(EntityNotFoundError):
        await handlers.list_reactions.execute(
            ListReactionsQuery(message_id=MessageId.generate())
        )


@pytest.mark.asyncio
async def test_outsider_cannot_react(handlers, chat, new_user_id):
    _, _, _, message = await chat()

    with pytest.raises(AccessDeniedError):
        await handlers.add_reaction.execute(
            AddReactionCommand(message_id=message.id, user_id=new_user_id(), emoji="👍")
        )


@pytest.mark.asyncio
async def test_remove_reaction(handlers, chat):
    _, _, bob, message = await chat()
    await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji="👍")
    )

    removed = await handlers.remove_reaction.execute(
        RemoveReactionCommand(message_id=message.id, emoji="👍", user_id=bob)
    )

    assert removed.emoji == "👍"
    assert await handlers.list_reactions.execute(
        ListReactionsQuery(message_id=message.id)
    ) == []
    with pytest.raises(EntityNotFoundError) as exc_info:
        await handlers.remove_reaction.execute(
            RemoveReactionCommand(message_id=message.id, emoji="👍", user_id=bob)
        )
    assert exc_info.value.message == "Reaction not found"


@pytest.mark.asyncio
async def test_departed_participant_cannot_remove_reaction(handlers, chat):
    conversation, _, bob, message = await chat()
    await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji="👍")
    )
    await handlers.mark_participant_left.execute(
        MarkParticipantLeftCommand(conversation_id=conversation.id, user_id=bob)
    )

    with pytest.raises(AccessDeniedError):
        await handlers.remove_reaction.execute(
            RemoveReactionCommand(message_id=message.id, emoji="👍", user_id=bob)
        )


# ==================== BOOKMARKS ====================


@pytest.mark.asyncio
async def test_bookmark_lifecycle(handlers, chat):
    conversation, _, bob, message = await chat(text="remember me")

    bookmark = await handlers.add_bookmark.execute(
        AddBookmarkCommand(message_id=message.id, user_id=bob)
    )
    again = await handlers.add_bookmark.execute(
        AddBookmarkCommand(message_id=message.id, user_id=bob)
    )
    listed = await handlers.list_bookmarks.execute(ListBookmarksQuery(user_id=bob))

    assert again.id == bookmark.id
    assert len(listed) == 1
    assert listed[0].message_id == message.id
    assert listed[0].conversation_id == conversation.id
    assert listed[0].text == "remember me"

    await handlers.remove_bookmark.execute(
        RemoveBookmarkCommand(message_id=message.id, user_id=bob)
    )
    assert await handlers.list_bookmarks.execute(ListBookmarksQuery(user_id=bob)) == []


@pytest.mark.asyncio
async def test_bookmarks_are_scoped_to_their_owner(handlers, chat):
    _, _, bob, first_message = await chat(text="first")
    conversation, alice, _, _ = await chat(text="other")
    await handlers.add_bookmark.execute(
        AddBookmarkCommand(message_id=first_message.id, user_id=bob)
    )
    second_message = await handlers.send_message.execute(
        SendMessageCommand(conversation_id=conversation.id, sender_id=alice, text="second")
    )
    await handlers.add_bookmark.execute(
        AddBookmarkCommand(message_id=second_message.id, user_id=alice)
    )

    bob_bookmarks = await handlers.list_bookmarks.execute(ListBookmarksQuery(user_id=bob))
    alice_bookmarks = await handlers.list_bookmarks.execute(
        ListBookmarksQuery(user_id=alice)
    )

    assert [b.text for b in bob_bookmarks] == ["first"]
    assert [b.text for b in alice_bookmarks] == ["second"]


@pytest.mark.asyncio
async def test_bookmarked_deleted_message_hides_text(handlers, chat):
    _, alice, bob, message = await chat(text="secret")
    await handlers.add_bookmark.execute(
        AddBookmarkCommand(message_id=message.id, user_id=bob)
    )
    await handlers.delete_message.execute(
        DeleteMessageCommand(message_id=message.id, request_user_id=alice)
    )

    listed = await handlers.list_bookmarks.execute(ListBookmarksQuery(user_id=bob))

    assert len(listed) == 1
    assert listed[0].text is None


@pytest.mark.asyncio
async def test_remove_missing_bookmark(handlers, chat):
    _, _, bob, message = await chat()

    with pytest.raises(EntityNotFoundError) as exc_info:
        await handlers.remove_bookmark.execute(
            RemoveBookmarkCommand(message_id=message.id, user_id=bob)
        )
    assert exc_info.value.message == "Bookmark not found"


@pytest.mark.asyncio
async def test_outsider_cannot_bookmark(handlers, chat, new_user_id):
    _, _, _, message = await chat()

    with pytest.raises(AccessDeniedError):
        await handlers.add_bookmark.execute(
            AddBookmarkCommand(message_id=message.id, user_id=new_user_id())
        )


@pytest.mark.asyncio
async def test_list_bookmarks_requires_user(handlers):
    with pytest.raises(RequiredFieldError):
        await handlers.list_bookmarks.execute(ListBookmarksQuery(user_id=UserId("")))


@pytest.mark.asyncio
async def test_remove_reaction_trims_emoji_like_add(handlers, chat):
    _, _, bob, message = await chat()
    await handlers.add_reaction.execute(
        AddReactionCommand(message_id=message.id, user_id=bob, emoji=" X ")
    )

    removed = await handlers.remove_reaction.execute(
        RemoveReactionCommand(message_id=message.id, emoji=" X ", user_id=bob)
    )

    assert removed.emoji == "X"
    assert await handlers.list_reactions.execute(
        ListReactionsQuery(message_id=message.id)
    ) == []


@pytest.mark.asyncio
async def test_remove_reaction_blank_emoji_is_required(handlers, chat):
    _, _, bob, message = await chat()

    with pytest.raises(RequiredFieldError) as exc_info:
        await handlers.remove_reaction.execute(
            RemoveReactionCommand(message_id=message.id, emoji="   ", user_id=bob)
        )
    assert exc_info.value.message == "emoji is required"
