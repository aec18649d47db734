"""Standard messages and actions used when raising domain errors."""

# Conversation validation
GROUP_NAME_REQUIRED = "Group conversations require a name"
PARTICIPANT_REQUIRED = "At least one participant is required"
PARTICIPANT_ALREADY_ACTIVE = "User is already an active participant"

# Message consistency
MESSAGE_CONVERSATION_MISMATCH = "Referenced message must belong to the same conversation"
LAST_READ_MESSAGE_MISMATCH = "last_read_message_id must belong to the conversation"

# Actions for AccessDeniedError
ACCESS_CONVERSATION = "access this conversation"
DELETE_MESSAGE = "delete this message"
