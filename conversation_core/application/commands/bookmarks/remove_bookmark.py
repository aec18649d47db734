"""Remove Bookmark Command."""

from dataclasses import dataclass

from conversation_core.domain.entities.bookmark import Bookmark
from conversation_core.domain.exceptions import EntityNotFoundError
from conversation_core.domain.ports.repositories import (
    BookmarkRepository,
    MessageRepository,
)
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler
from conversation_core.application.common.participant_guard import ParticipantGuard


@dataclass(frozen=True)
class RemoveBookmarkCommand(Command[Bookmark]):
    message_id: MessageId
    user_id: UserId


class RemoveBookmarkHandler(CommandHandler[Bookmark]):
    def __init__(
        self,
        msg_repo: MessageRepository,
        bookmark_repo: BookmarkRepository,
        guard: ParticipantGuard,
    ):
        self._msg_repo = msg_repo
        self._bookmark_repo = bookmark_repo
        self._guard = guard

    async def execute(self, command: RemoveBookmarkCommand) -> Bookmark:
        message = await self._msg_repo.get_by_id(command.message_id)
        if not message:
            raise EntityNotFoundError("Message")

        await self._guard.ensure_active_participant(
            message.conversation_id, command.user_id
        )

        removed = await self._bookmark_repo.remove(command.message_id, command.user_id)
        if not removed:
            raise EntityNotFoundError("Bookmark")
        return removed
