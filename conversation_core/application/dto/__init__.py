"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversation.py → ConversationDTO, ParticipantDTO
- message.py      → MessageDTO
- read_state.py   → ConversationReadDTO, UnreadCountDTO
- reaction.py     → ReactionDTO
- bookmark.py     → BookmarkDTO, BookmarkListItemDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from conversation_core.application.dto.conversation import ConversationDTO, ParticipantDTO
from conversation_core.application.dto.message import MessageDTO
from conversation_core.application.dto.read_state import (
    ConversationReadDTO,
    UnreadCountDTO,
)
from conversation_core.application.dto.reaction import ReactionDTO
from conversation_core.application.dto.bookmark import BookmarkDTO, BookmarkListItemDTO

__all__ = [
    "ConversationDTO",
    "ParticipantDTO",
    "MessageDTO",
    "ConversationReadDTO",
    "UnreadCountDTO",
    "ReactionDTO",
    "BookmarkDTO",
    "BookmarkListItemDTO",
]
