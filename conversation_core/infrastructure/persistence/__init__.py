"""
Persistence Layer - Repository implementations for the domain ports.

- in_memory.py          → InMemoryChatStore and its repositories (tests, local runs)
- prisma_*_repository.py → Prisma/PostgreSQL repositories (production)

The Prisma modules need a generated Prisma client, so they are imported
directly by the container instead of being re-exported here.
"""

from conversation_core.infrastructure.persistence.in_memory import (
    InMemoryChatStore,
    InMemoryConversationRepository,
    InMemoryParticipantRepository,
    InMemoryMessageRepository,
    InMemoryReactionRepository,
    InMemoryReadStateRepository,
    InMemoryBookmarkRepository,
)

__all__ = [
    "InMemoryChatStore",
    "InMemoryConversationRepository",
    "InMemoryParticipantRepository",
    "InMemoryMessageRepository",
    "InMemoryReactionRepository",
    "InMemoryReadStateRepository",
    "InMemoryBookmarkRepository",
]
