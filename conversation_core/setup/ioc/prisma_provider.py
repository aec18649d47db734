"""Dishka provider binding the repository ports to Prisma implementations."""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from conversation_core.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
    ReadStateRepository,
)
from conversation_core.infrastructure.persistence.prisma_bookmark_repository import (
    PrismaBookmarkRepository,
)
from conversation_core.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from conversation_core.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from conversation_core.infrastructure.persistence.prisma_participant_repository import (
    PrismaParticipantRepository,
)
from conversation_core.infrastructure.persistence.prisma_reaction_repository import (
    PrismaReactionRepository,
)
from conversation_core.infrastructure.persistence.prisma_read_state_repository import (
    PrismaReadStateRepository,
)


class PrismaProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(self, prisma: Prisma) -> ParticipantRepository:
        return PrismaParticipantRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, prisma: Prisma) -> ReactionRepository:
        return PrismaReactionRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_read_state_repository(self, prisma: Prisma) -> ReadStateRepository:
        return PrismaReadStateRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, prisma: Prisma) -> BookmarkRepository:
        return PrismaBookmarkRepository(prisma)
