"""
Mark Conversation Read Command - Move the caller's read pointer.

The pointer must reference a message of the same conversation. Forward-only
movement is not enforced here.
"""

from dataclasses import dataclass

from conversation_core.domain.entities.read_state import ConversationReadState
from conversation_core.domain.exceptions import DomainValidationError
from conversation_core.domain.exceptions import messages
from conversation_core.domain.ports.repositories import (
    MessageRepository,
    ReadStateRepository,
)
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler
from conversation_core.application.common.participant_guard import ParticipantGuard


@dataclass(frozen=True)
class MarkConversationReadCommand(Command[ConversationReadState]):
    conversation_id: ConversationId
    user_id: UserId
    last_read_message_id: MessageId


class MarkConversationReadHandler(CommandHandler[ConversationReadState]):
    def __init__(
        self,
        msg_repo: MessageRepository,
        read_state_repo: ReadStateRepository,
        guard: ParticipantGuard,
    ):
        self._msg_repo = msg_repo
        self._read_state_repo = read_state_repo
        self._guard = guard

    async def execute(
        self, command: MarkConversationReadCommand
    ) -> ConversationReadState:
        await self._guard.ensure_active_participant(
            command.conversation_id, command.user_id
        )

        message = await self._msg_repo.get_by_id(command.last_read_message_id)
        if not message or not message.belongs_to(command.conversation_id):
            raise DomainValidationError(messages.LAST_READ_MESSAGE_MISMATCH)

        return await self._read_state_repo.upsert(
            ConversationReadState.create(
                conversation_id=command.conversation_id,
                user_id=command.user_id,
                last_read_message_id=command.last_read_message_id,
            )
        )
