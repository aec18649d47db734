"""Message queries."""

from conversation_core.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
]
