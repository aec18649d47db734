"""
Dishka DI Container Setup.

- Registers repositories (port → implementation) and every command/query handler
- Scope.APP = created once and shared (storage client / in-memory store)
- Scope.REQUEST = new instance per HTTP request (repositories, guard, handlers)

Flow:
  Container → provides → InMemoryMessageRepository → to → SendMessageHandler
                                    ↓
                            uses MessageRepository interface
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from conversation_core.config.settings import Config
from conversation_core.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
    ReadStateRepository,
)
from conversation_core.infrastructure.persistence import (
    InMemoryBookmarkRepository,
    InMemoryChatStore,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
    InMemoryReactionRepository,
    InMemoryReadStateRepository,
)
from conversation_core.application.common.participant_guard import ParticipantGuard
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


class InMemoryStoreProvider(Provider):
    """
    Repositories backed by a process-local InMemoryChatStore.

    Pass an existing store to share state with the caller (tests).
    """

    def __init__(self, store: Optional[InMemoryChatStore] = None):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryChatStore:
        return self._store if self._store is not None else InMemoryChatStore()

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(
        self, store: InMemoryChatStore
    ) -> ConversationRepository:
        return InMemoryConversationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(
        self, store: InMemoryChatStore
    ) -> ParticipantRepository:
        return InMemoryParticipantRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryChatStore) -> MessageRepository:
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, store: InMemoryChatStore) -> ReactionRepository:
        return InMemoryReactionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_read_state_repository(
        self, store: InMemoryChatStore
    ) -> ReadStateRepository:
        return InMemoryReadStateRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, store: InMemoryChatStore) -> BookmarkRepository:
        return InMemoryBookmarkRepository(store)


class HandlerProvider(Provider):
    """
    Application handlers.

    Parameters ask for abstract ports; dishka resolves them through whichever
    repository provider the container was built with.
    """

    @provide(scope=Scope.REQUEST)
    def get_participant_guard(
        self, participant_repository: ParticipantRepository
    ) -> ParticipantGuard:
        return ParticipantGuard(participant_repository)

    # ==================== CONVERSATIONS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> CreateConversationHandler:
        return CreateConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> GetConversationHandler:
        return GetConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_add_participant_handler(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        system_message_handler: CreateSystemMessageHandler,
    ) -> AddParticipantHandler:
        return AddParticipantHandler(
            conversation_repository=conversation_repository,
            participant_repository=participant_repository,
            system_message_handler=system_message_handler,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_participant_left_handler(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        system_message_handler: CreateSystemMessageHandler,
    ) -> MarkParticipantLeftHandler:
        return MarkParticipantLeftHandler(
            conversation_repository=conversation_repository,
            participant_repository=participant_repository,
            system_message_handler=system_message_handler,
        )

    # ==================== MESSAGES ====================

    @provide(scope=Scope.REQUEST)
    def get_create_system_message_handler(
        self, message_repository: MessageRepository
    ) -> CreateSystemMessageHandler:
        return CreateSystemMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self, message_repository: MessageRepository, guard: ParticipantGuard
    ) -> SendMessageHandler:
        return SendMessageHandler(msg_repo=message_repository, guard=guard)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self, message_repository: MessageRepository, guard: ParticipantGuard
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(msg_repo=message_repository, guard=guard)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository, guard: ParticipantGuard
    ) -> ListMessagesHandler:
        return ListMessagesHandler(
            msg_repo=message_repository,
            guard=guard,
            max_limit=Config.MESSAGE_PAGE_MAX_LIMIT,
        )

    # ==================== READ RECEIPTS ====================

    @provide(scope=Scope.REQUEST)
    def get_mark_conversation_read_handler(
        self,
        message_repository: MessageRepository,
        read_state_repository: ReadStateRepository,
        guard: ParticipantGuard,
    ) -> MarkConversationReadHandler:
        return MarkConversationReadHandler(
            msg_repo=message_repository,
            read_state_repo=read_state_repository,
            guard=guard,
        )

    @provide(scope=Scope.REQUEST)
    def get_count_unread_handler(
        self, read_state_repository: ReadStateRepository, guard: ParticipantGuard
    ) -> CountUnreadHandler:
        return CountUnreadHandler(read_state_repo=read_state_repository, guard=guard)

    # ==================== REACTIONS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_reaction_handler(
        self,
        message_repository: MessageRepository,
        reaction_repository: ReactionRepository,
        guard: ParticipantGuard,
    ) -> AddReactionHandler:
        return AddReactionHandler(message_repository, reaction_repository, guard)

    @provide(scope=Scope.REQUEST)
    def get_remove_reaction_handler(
        self,
        message_repository: MessageRepository,
        reaction_repository: ReactionRepository,
        guard: ParticipantGuard,
    ) -> RemoveReactionHandler:
        return RemoveReactionHandler(message_repository, reaction_repository, guard)

    @provide(scope=Scope.REQUEST)
    def get_list_reactions_handler(
        self,
        message_repository: MessageRepository,
        reaction_repository: ReactionRepository,
    ) -> ListReactionsHandler:
        return ListReactionsHandler(message_repository, reaction_repository)

    # ==================== BOOKMARKS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_bookmark_handler(
        self,
        message_repository: MessageRepository,
        bookmark_repository: BookmarkRepository,
        guard: ParticipantGuard,
    ) -> AddBookmarkHandler:
        return AddBookmarkHandler(message_repository, bookmark_repository, guard)

    @provide(scope=Scope.REQUEST)
    def get_remove_bookmark_handler(
        self,
        message_repository: MessageRepository,
        bookmark_repository: BookmarkRepository,
        guard: ParticipantGuard,
    ) -> RemoveBookmarkHandler:
        return RemoveBookmarkHandler(message_repository, bookmark_repository, guard)

    @provide(scope=Scope.REQUEST)
    def get_list_bookmarks_handler(
        self, bookmark_repository: BookmarkRepository
    ) -> ListBookmarksHandler:
        return ListBookmarksHandler(bookmark_repository)


def create_container(
    backend: str = Config.STORAGE_BACKEND,
    store: Optional[InMemoryChatStore] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - backend "prisma" needs a generated Prisma client and DATABASE_URL
    - anything else uses the in-memory store (optionally a caller-supplied one)
    - Call this ONCE at app startup
    """
    if backend == "prisma":
        from conversation_core.setup.ioc.prisma_provider import PrismaProvider

        repository_provider = PrismaProvider()
    else:
        repository_provider = InMemoryStoreProvider(store)
    return make_async_container(repository_provider, HandlerProvider())
