"""Conversation commands."""

from .create_conversation import CreateConversationCommand, CreateConversationHandler
from .add_participant import AddParticipantCommand, AddParticipantHandler
from .mark_participant_left import (
    MarkParticipantLeftCommand,
    MarkParticipantLeftHandler,
)

__all__ = [
    "CreateConversationCommand",
    "CreateConversationHandler",
    "AddParticipantCommand",
    "AddParticipantHandler",
    "MarkParticipantLeftCommand",
    "MarkParticipantLeftHandler",
]
