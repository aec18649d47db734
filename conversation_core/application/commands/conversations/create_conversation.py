"""
Create Conversation Command.

- Group conversations must be named
- At least one participant is required; every initial participant is a member
- Conversation and participant rows are created by the repository in one call
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from conversation_core.domain.entities.conversation import Conversation
from conversation_core.domain.exceptions import DomainValidationError
from conversation_core.domain.exceptions import messages
from conversation_core.domain.ports.repositories import ConversationRepository
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.application.common.interfaces import Command, CommandHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConversationCommand(Command[Conversation]):
    kind: str
    participant_ids: list[UserId] = field(default_factory=list)
    name: Optional[str] = None


class CreateConversationHandler(CommandHandler[Conversation]):
    _conversation_repository: ConversationRepository

    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: CreateConversationCommand) -> Conversation:
        name = command.name.strip() if command.name else None
        if command.kind == "group" and not name:
            raise DomainValidationError(messages.GROUP_NAME_REQUIRED)

        participant_ids = [user_id for user_id in command.participant_ids if user_id]
        if not participant_ids:
            raise DomainValidationError(messages.PARTICIPANT_REQUIRED)

        conversation = Conversation.create(
            kind=command.kind, participant_ids=participant_ids, name=name
        )
        created = await self._conversation_repository.create(conversation)
        logger.info(
            f"Created {created.kind} conversation {created.id.value} "
            f"with {len(created.participants)} participant(s)"
        )
        return created
