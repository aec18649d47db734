import os
import time
import uuid
from types import SimpleNamespace

import jwt
import pytest

os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret")
os.environ.setdefault("SERVICE_AUTH_AUDIENCE", "your_service_audience")
os.environ.setdefault("SERVICE_AUTH_ISSUER", "your_service_name")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from fastapi.testclient import TestClient

from conversation_core.config.settings import Config
from conversation_core.fastapi_app import create_fastapi_app
from conversation_core.setup.ioc import create_container
from conversation_core.application.common import ParticipantGuard
from conversation_core.application.commands.conversations import (
    AddParticipantHandler,
    CreateConversationHandler,
    MarkParticipantLeftHandler,
)
from conversation_core.application.commands.messages import (
    CreateSystemMessageHandler,
    DeleteMessageHandler,
    SendMessageHandler,
)
from conversation_core.application.commands.read_receipts import (
    MarkConversationReadHandler,
)
from conversation_core.application.commands.reactions import (
    AddReactionHandler,
    RemoveReactionHandler,
)
from conversation_core.application.commands.bookmarks import (
    AddBookmarkHandler,
    RemoveBookmarkHandler,
)
from conversation_core.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from conversation_core.application.queries.messages import ListMessagesHandler
from conversation_core.application.queries.read_receipts import CountUnreadHandler
from conversation_core.application.queries.reactions import ListReactionsHandler
from conversation_core.application.queries.bookmarks import ListBookmarksHandler
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.infrastructure.persistence import (
    InMemoryBookmarkRepository,
    InMemoryChatStore,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
    InMemoryReactionRepository,
    InMemoryReadStateRepository,
)


def _service_token(user_id: str, expires_in: int = 300, **overrides):
    now = int(time.time())
    claims = {
        "sub": user_id,
        "iat": now,
        "exp": now + expires_in,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    claims.update(overrides)
    return jwt.encode(claims, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


@pytest.fixture()
def new_user_id():
    """Factory: a fresh random user id."""
    return lambda: UserId(str(uuid.uuid4()))


@pytest.fixture()
def store():
    """A fresh in-memory database per test."""
    return InMemoryChatStore()


@pytest.fixture()
def repos(store):
    return SimpleNamespace(
        conversations=InMemoryConversationRepository(store),
        participants=InMemoryParticipantRepository(store),
        messages=InMemoryMessageRepository(store),
        reactions=InMemoryReactionRepository(store),
        read_states=InMemoryReadStateRepository(store),
        bookmarks=InMemoryBookmarkRepository(store),
    )


@pytest.fixture()
def guard(repos):
    return ParticipantGuard(repos.participants)


@pytest.fixture()
def handlers(repos, guard):
    """Handlers wired by hand the same way HandlerProvider wires them."""
    system_messages = CreateSystemMessageHandler(repos.messages)
    return SimpleNamespace(
        create_conversation=CreateConversationHandler(repos.conversations),
        get_conversation=GetConversationHandler(repos.conversations),
        list_conversations=ListConversationsHandler(repos.conversations),
        add_participant=AddParticipantHandler(
            repos.conversations, repos.participants, system_messages
        ),
        mark_participant_left=MarkParticipantLeftHandler(
            repos.conversations, repos.participants, system_messages
        ),
        create_system_message=system_messages,
        send_message=SendMessageHandler(repos.messages, guard),
        delete_message=DeleteMessageHandler(repos.messages, guard),
        list_messages=ListMessagesHandler(
            repos.messages, guard, max_limit=Config.MESSAGE_PAGE_MAX_LIMIT
        ),
        mark_read=MarkConversationReadHandler(repos.messages, repos.read_states, guard),
        count_unread=CountUnreadHandler(repos.read_states, guard),
        add_reaction=AddReactionHandler(repos.messages, repos.reactions, guard),
        remove_reaction=RemoveReactionHandler(repos.messages, repos.reactions, guard),
        list_reactions=ListReactionsHandler(repos.messages, repos.reactions),
        add_bookmark=AddBookmarkHandler(repos.messages, repos.bookmarks, guard),
        remove_bookmark=RemoveBookmarkHandler(repos.messages, repos.bookmarks, guard),
        list_bookmarks=ListBookmarksHandler(repos.bookmarks),
    )


@pytest.fixture()
def app(store):
    """Create a new FastAPI app over the test's in-memory store."""
    return create_fastapi_app(create_container(backend="memory", store=store))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Factory: authentication headers for the given user id."""

    def _headers(user_id):
        value = user_id.value if isinstance(user_id, UserId) else user_id
        return {"Authorization": f"Bearer {_service_token(value)}"}

    return _headers


@pytest.fixture()
def service_token():
    """Factory: a signed service token, see _service_token."""
    return _service_token
