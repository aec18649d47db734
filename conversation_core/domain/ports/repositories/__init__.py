"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application handlers need
- Returns None / False / empty for absence, never raises "not found"
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from conversation_core.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from conversation_core.domain.ports.repositories.participant_repository import (
    ParticipantRepository,
)
from conversation_core.domain.ports.repositories.message_repository import (
    MessageRepository,
)
from conversation_core.domain.ports.repositories.reaction_repository import (
    ReactionRepository,
)
from conversation_core.domain.ports.repositories.read_state_repository import (
    ReadStateRepository,
)
from conversation_core.domain.ports.repositories.bookmark_repository import (
    BookmarkRepository,
)

__all__ = [
    "ConversationRepository",
    "ParticipantRepository",
    "MessageRepository",
    "ReactionRepository",
    "ReadStateRepository",
    "BookmarkRepository",
]
