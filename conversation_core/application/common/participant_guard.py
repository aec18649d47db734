"""
ParticipantGuard - The single membership check used by every handler that acts
on behalf of a user inside a conversation.
"""

from conversation_core.domain.entities.participant import Participant
from conversation_core.domain.exceptions import AccessDeniedError
from conversation_core.domain.exceptions import messages
from conversation_core.domain.ports.repositories import ParticipantRepository
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.user_id import UserId


class ParticipantGuard:
    def __init__(self, participant_repository: ParticipantRepository):
        self._participant_repository = participant_repository

    async def ensure_active_participant(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Participant:
        """
        Return the caller's participant row.

        Raises:
            AccessDeniedError: If the user never joined or has left the conversation
        """
        participant = None
        if user_id:
            participant = await self._participant_repository.find(
                conversation_id, user_id
            )
        if participant is None or not participant.is_active:
            raise AccessDeniedError(messages.ACCESS_CONVERSATION)
        return participant

    async def is_active_admin(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        if not user_id:
            return False
        participant = await self._participant_repository.find(
            conversation_id, user_id
        )
        return participant is not None and participant.is_active and participant.is_admin
