"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler
from .create_system_message import (
    CreateSystemMessageCommand,
    CreateSystemMessageHandler,
)
from .delete_message import DeleteMessageCommand, DeleteMessageHandler

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "CreateSystemMessageCommand",
    "CreateSystemMessageHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
]
