"""Read receipt commands."""

from .mark_conversation_read import (
    MarkConversationReadCommand,
    MarkConversationReadHandler,
)

__all__ = [
    "MarkConversationReadCommand",
    "MarkConversationReadHandler",
]
