"""Conversation-related queries."""

from conversation_core.application.queries.conversations.get_conversation import (
    GetConversationQuery,
    GetConversationHandler,
)
from conversation_core.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "GetConversationQuery",
    "GetConversationHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
]
