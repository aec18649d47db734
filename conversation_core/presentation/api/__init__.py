from conversation_core.presentation.api.conversations import (
    router as conversations_router,
)
from conversation_core.presentation.api.messages import router as messages_router
from conversation_core.presentation.api.bookmarks import router as bookmarks_router

__all__ = [
    "conversations_router",
    "messages_router",
    "bookmarks_router",
]
