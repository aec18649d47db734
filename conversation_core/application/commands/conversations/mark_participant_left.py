"""
Mark Participant Left Command.

Sets the participant's leave timestamp, then emits a `leave` system message.
Same non-transactional semantics as AddParticipantHandler. Leaving twice is left
to the repository; the core does not re-check "already left".
"""

import logging
from dataclasses import dataclass

from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.exceptions import EntityNotFoundError
from conversation_core.domain.ports.repositories import (
    ConversationRepository,
    ParticipantRepository,
)
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler
from conversation_core.application.commands.messages.create_system_message import (
    CreateSystemMessageCommand,
    CreateSystemMessageHandler,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkParticipantLeftCommand(Command[Participant]):
    conversation_id: ConversationId
    user_id: UserId


class MarkParticipantLeftHandler(CommandHandler[Participant]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        system_message_handler: CreateSystemMessageHandler,
    ):
        self._conversation_repository = conversation_repository
        self._participant_repository = participant_repository
        self._system_message_handler = system_message_handler

    async def execute(self, command: MarkParticipantLeftCommand) -> Participant:
        conversation = await self._conversation_repository.get_by_id(
            command.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError("Conversation")

        participant = None
        if command.user_id:
            participant = await self._participant_repository.mark_left(
                command.conversation_id, command.user_id
            )
        if participant is None:
            raise EntityNotFoundError("Participant")
        logger.info(
            f"User {command.user_id.value} left conversation "
            f"{command.conversation_id.value}"
        )

        await self._system_message_handler.execute(
            CreateSystemMessageCommand(
                conversation_id=command.conversation_id,
                system_event="leave",
            )
        )
        return participant
