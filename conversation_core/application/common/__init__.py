from conversation_core.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)
from conversation_core.application.common.participant_guard import ParticipantGuard

__all__ = [
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "ParticipantGuard",
]
