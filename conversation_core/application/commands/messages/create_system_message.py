"""
CreateSystemMessage Command - Record a conversation-level event.

No participant check: the event is emitted by the system, not by a user.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from conversation_core.domain.entities.message import Message
from conversation_core.domain.ports.repositories import MessageRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.application.common.interfaces import Command, CommandHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateSystemMessageCommand(Command[Message]):
    conversation_id: ConversationId
    system_event: str
    text: Optional[str] = None


class CreateSystemMessageHandler(CommandHandler[Message]):
    def __init__(self, msg_repo: MessageRepository):
        self._msg_repo = msg_repo

    async def execute(self, command: CreateSystemMessageCommand) -> Message:
        message = Message.create_system(
            conversation_id=command.conversation_id,
            system_event=command.system_event,
            text=command.text,
        )
        created = await self._msg_repo.create(message)
        logger.info(
            f"System event '{command.system_event}' recorded in "
            f"{command.conversation_id.value}"
        )
        return created
