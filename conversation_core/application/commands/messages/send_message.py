"""
SendMessage Command - Post a text message into a conversation.

Handler:
1. Verify the sender is an active participant
2. If replying, verify the referenced message lives in the same conversation
3. Save the text message with the sender attached
"""

import logging
from dataclasses import dataclass
from typing import Optional

from conversation_core.domain.entities.message import Message
from conversation_core.domain.exceptions import DomainValidationError
from conversation_core.domain.exceptions import messages
from conversation_core.domain.ports.repositories import MessageRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler
from conversation_core.application.common.participant_guard import ParticipantGuard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    conversation_id: ConversationId
    sender_id: UserId
    text: Optional[str] = None
    reply_to_message_id: Optional[MessageId] = None


class SendMessageHandler(CommandHandler[Message]):
    def __init__(self, msg_repo: MessageRepository, guard: ParticipantGuard):
        self._msg_repo = msg_repo
        self._guard = guard

    async def execute(self, command: SendMessageCommand) -> Message:
        await self._guard.ensure_active_participant(
            command.conversation_id, command.sender_id
        )

        if command.reply_to_message_id is not None:
            referenced = await self._msg_repo.get_by_id(command.reply_to_message_id)
            if not referenced or not referenced.belongs_to(command.conversation_id):
                raise DomainValidationError(messages.MESSAGE_CONVERSATION_MISMATCH)

        message = Message.create_text(
            conversation_id=command.conversation_id,
            sender_user_id=command.sender_id,
            text=command.text,
            reply_to_message_id=command.reply_to_message_id,
        )
        created = await self._msg_repo.create(message)
        logger.debug(
            f"Message {created.id.value} sent to {command.conversation_id.value}"
        )
        return created
