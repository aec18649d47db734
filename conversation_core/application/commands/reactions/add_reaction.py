"""Add Reaction Command."""

from dataclasses import dataclass

from conversation_core.domain.entities.reaction import Reaction
from conversation_core.domain.exceptions import EntityNotFoundError, RequiredFieldError
from conversation_core.domain.ports.repositories import (
    MessageRepository,
    ReactionRepository,
)
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler
from conversation_core.application.common.participant_guard import ParticipantGuard


@dataclass(frozen=True)
class AddReactionCommand(Command[Reaction]):
    message_id: MessageId
    user_id: UserId
    emoji: str


class AddReactionHandler(CommandHandler[Reaction]):
    def __init__(
        self,
        msg_repo: MessageRepository,
        reaction_repo: ReactionRepository,
        guard: ParticipantGuard,
    ):
        self._msg_repo = msg_repo
        self._reaction_repo = reaction_repo
        self._guard = guard

    async def execute(self, command: AddReactionCommand) -> Reaction:
        emoji = command.emoji.strip() if command.emoji else ""
        if not emoji:
            raise RequiredFieldError("emoji")

        message = await self._msg_repo.get_by_id(command.message_id)
        if not message:
            raise EntityNotFoundError("Message")

        await self._guard.ensure_active_participant(
            message.conversation_id, command.user_id
        )

        return await self._reaction_repo.add(
            Reaction.create(
                message_id=command.message_id, user_id=command.user_id, emoji=emoji
            )
        )
