"""
Add Participant Command.

Two steps, not transactional:
1. Insert (or reactivate) the participant row
2. Announce the join with a system message

If step 2 fails its error propagates unchanged; the participant stays added and
the announcement can be re-issued through CreateSystemMessageHandler.
"""

import logging
from dataclasses import dataclass

from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    RequiredFieldError,
)
from conversation_core.domain.exceptions import messages
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
class AddParticipantCommand(Command[Participant]):
    conversation_id: ConversationId
    user_id: UserId
    role: str = "member"


class AddParticipantHandler(CommandHandler[Participant]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        system_message_handler: CreateSystemMessageHandler,
    ):
        self._conversation_repository = conversation_repository
        self._participant_repository = participant_repository
        self._system_message_handler = system_message_handler

    async def execute(self, command: AddParticipantCommand) -> Participant:
        if not command.user_id:
            raise RequiredFieldError("user_id")

        conversation = await self._conversation_repository.get_by_id(
            command.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError("Conversation")

        existing = await self._participant_repository.find(
            command.conversation_id, command.user_id
        )
        if existing is not None and existing.is_active:
            raise DomainValidationError(messages.PARTICIPANT_ALREADY_ACTIVE)

        if existing is not None:
            # One row per (conversation, user): a departed user is reactivated
            existing.rejoin(command.role)
            participant = existing
        else:
            participant = Participant.create(
                conversation_id=command.conversation_id,
                user_id=command.user_id,
                role=command.role,
            )
        participant = await self._participant_repository.add(participant)
        logger.info(
            f"User {command.user_id.value} joined conversation "
            f"{command.conversation_id.value} as {participant.role}"
        )

        await self._system_message_handler.execute(
            CreateSystemMessageCommand(
                conversation_id=command.conversation_id,
                system_event="join",
                text=f"{command.user_id.value} joined",
            )
        )
        return participant
