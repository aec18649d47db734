"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.entities.message import Message
from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.entities.bookmark import Bookmark, BookmarkedMessage
from conversation_core.domain.entities.read_state import ConversationReadState

__all__ = [
    "Conversation",
    "Participant",
    "Message",
    "Reaction",
    "Bookmark",
    "BookmarkedMessage",
    "ConversationReadState",
]
