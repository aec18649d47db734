import pytest

from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.exceptions import AccessDeniedError
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


@pytest.fixture()
def conversation_id():
    return ConversationId.generate()


@pytest.mark.asyncio
async def test_active_member_passes(guard, repos, conversation_id, new_user_id):
    alice = new_user_id()
    await repos.participants.add(Participant.create(conversation_id, alice))

    participant = await guard.ensure_active_participant(conversation_id, alice)

    assert participant.user_id == alice


@pytest.mark.asyncio
async def test_unknown_user_is_denied(guard, conversation_id, new_user_id):
    with pytest.raises(AccessDeniedError) as exc_info:
        await guard.ensure_active_participant(conversation_id, new_user_id())
    assert exc_info.value.message == "You are not authorized to access this conversation"


@pytest.mark.asyncio
async def test_empty_user_is_denied(guard, conversation_id):
    with pytest.raises(AccessDeniedError):
        await guard.ensure_active_participant(conversation_id, UserId(""))


@pytest.mark.asyncio
async def test_departed_member_is_denied(guard, repos, conversation_id, new_user_id):
    alice = new_user_id()
    await repos.participants.add(Participant.create(conversation_id, alice))
    await repos.participants.mark_left(conversation_id, alice)

    with pytest.raises(AccessDeniedError):
        await guard.ensure_active_participant(conversation_id, alice)


@pytest.mark.asyncio
async def test_is_active_admin(guard, repos, conversation_id, new_user_id):
    admin, member = new_user_id(), new_user_id()
    await repos.participants.add(Participant.create(conversation_id, admin, role="admin"))
    await repos.participants.add(Participant.create(conversation_id, member))

    assert await guard.is_active_admin(conversation_id, admin) is True
    assert await guard.is_active_admin(conversation_id, member) is False
    assert await guard.is_active_admin(conversation_id, new_user_id()) is False
    assert await guard.is_active_admin(conversation_id, UserId("")) is False

    await repos.participants.mark_left(conversation_id, admin)
    assert await guard.is_active_admin(conversation_id, admin) is False
