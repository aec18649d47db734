"""Delete Message Command."""

import logging
from dataclasses import dataclass

from conversation_core.domain.exceptions import AccessDeniedError, EntityNotFoundError
from conversation_core.domain.exceptions import messages
from conversation_core.domain.ports.repositories import MessageRepository
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler
from conversation_core.application.common.participant_guard import ParticipantGuard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteMessageCommand(Command[bool]):
    message_id: MessageId
    request_user_id: UserId


class DeleteMessageHandler(CommandHandler[bool]):
    def __init__(self, msg_repo: MessageRepository, guard: ParticipantGuard):
        self._msg_repo = msg_repo
        self._guard = guard

    async def execute(self, command: DeleteMessageCommand) -> bool:
        message = await self._msg_repo.get_by_id(command.message_id)
        if not message:
            raise EntityNotFoundError("Message")

        # The sender may always delete; anyone else must administer the conversation
        if not message.is_sent_by(command.request_user_id):
            is_admin = await self._guard.is_active_admin(
                message.conversation_id, command.request_user_id
            )
            if not is_admin:
                raise AccessDeniedError(messages.DELETE_MESSAGE)

        deleted = await self._msg_repo.delete(
            command.message_id, command.request_user_id
        )
        logger.info(
            f"Message {command.message_id.value} deleted by "
            f"{command.request_user_id.value}"
        )
        return deleted
