"""
Conversations API Router - conversations, participants, messages and read receipts.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository
                                 ↓
  HTTP Response ← Router ← DTO ← Result

Domain errors are not caught here; fastapi_app maps them to their status hint.
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from conversation_core.application.commands.conversations import (
    AddParticipantCommand,
    AddParticipantHandler,
    CreateConversationCommand,
    CreateConversationHandler,
    MarkParticipantLeftCommand,
    MarkParticipantLeftHandler,
)
from conversation_core.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from conversation_core.application.commands.read_receipts import (
    MarkConversationReadCommand,
    MarkConversationReadHandler,
)
from conversation_core.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from conversation_core.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from conversation_core.application.queries.read_receipts import (
    CountUnreadHandler,
    CountUnreadQuery,
)
from conversation_core.application.dto import (
    ConversationDTO,
    ConversationReadDTO,
    MessageDTO,
    ParticipantDTO,
    UnreadCountDTO,
)
from conversation_core.domain.value_objects.conversation_id import ConversationId
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.presentation.dependencies.auth import AuthUser, get_current_user
from conversation_core.config.settings import Config


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateConversationRequest(BaseModel):
    kind: Literal["direct", "group"]
    name: Optional[str] = None
    participant_ids: list[str]


class AddParticipantRequest(BaseModel):
    user_id: str
    role: Literal["member", "admin"] = "member"


class SendMessageRequest(BaseModel):
    text: Optional[str] = None
    reply_to_message_id: Optional[str] = None


class UpdateConversationReadRequest(BaseModel):
    last_read_message_id: str


class UpdateConversationReadResponse(BaseModel):
    """
    {
        "status": "ok",
        "read": {"id": "uuid", "last_read_message_id": "uuid", ...}
    }
    """

    status: Literal["ok"] = "ok"
    read: ConversationReadDTO


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Absent or non-numeric limits fall back to the repository default."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=ConversationDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    handler: FromDishka[CreateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a conversation with its initial participants."""
    command = CreateConversationCommand(
        kind=request.kind,
        name=request.name,
        participant_ids=[UserId(pid) for pid in request.participant_ids],
    )
    conversation = await handler.execute(command)
    return ConversationDTO.from_entity(conversation)


@router.get(
    "",
    response_model=list[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List every conversation the caller is or was part of."""
    query = ListConversationsQuery(
        user_id=current_user.user_id, limit=Config.CONVERSATION_USER_LIMIT
    )
    conversations = await handler.execute(query)
    return [ConversationDTO.from_entity(conv) for conv in conversations]


@router.get(
    "/{conversation_id}",
    response_model=ConversationDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    handler: FromDishka[GetConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    conversation = await handler.execute(
        GetConversationQuery(conversation_id=ConversationId(conversation_id))
    )
    return ConversationDTO.from_entity(conversation)


@router.post(
    "/{conversation_id}/participants",
    response_model=ParticipantDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_participant(
    conversation_id: str,
    request: AddParticipantRequest,
    handler: FromDishka[AddParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Add a participant and announce the join."""
    participant = await handler.execute(
        AddParticipantCommand(
            conversation_id=ConversationId(conversation_id),
            user_id=UserId(request.user_id),
            role=request.role,
        )
    )
    return ParticipantDTO.from_entity(participant)


@router.delete(
    "/{conversation_id}/participants/{user_id}",
    response_model=ParticipantDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def remove_participant(
    conversation_id: str,
    user_id: str,
    handler: FromDishka[MarkParticipantLeftHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Mark a participant as left and announce it."""
    participant = await handler.execute(
        MarkParticipantLeftCommand(
            conversation_id=ConversationId(conversation_id),
            user_id=UserId(user_id),
        )
    )
    return ParticipantDTO.from_entity(participant)


@router.get(
    "/{conversation_id}/messages",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    conversation_id: str,
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
    before: Optional[str] = None,
    limit: Optional[str] = None,
):
    """
    Page through conversation history, newest first.

    GET /conversations/{id}/messages?before=<message id>&limit=20
    """
    query = ListMessagesQuery(
        conversation_id=ConversationId(conversation_id),
        user_id=current_user.user_id,
        before=MessageId(before) if before else None,
        limit=parse_limit(limit),
    )
    messages = await handler.execute(query)
    return [MessageDTO.from_entity(msg) for msg in messages]


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = SendMessageCommand(
        conversation_id=ConversationId(conversation_id),
        sender_id=current_user.user_id,
        text=request.text,
        reply_to_message_id=(
            MessageId(request.reply_to_message_id)
            if request.reply_to_message_id
            else None
        ),
    )
    message = await handler.execute(command)
    return MessageDTO.from_entity(message)


@router.post(
    "/{conversation_id}/read",
    response_model=UpdateConversationReadResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def mark_conversation_read(
    conversation_id: str,
    request: UpdateConversationReadRequest,
    handler: FromDishka[MarkConversationReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    read_state = await handler.execute(
        MarkConversationReadCommand(
            conversation_id=ConversationId(conversation_id),
            user_id=current_user.user_id,
            last_read_message_id=MessageId(request.last_read_message_id),
        )
    )
    return UpdateConversationReadResponse(
        read=ConversationReadDTO.from_entity(read_state)
    )


@router.get(
    "/{conversation_id}/unread-count",
    response_model=UnreadCountDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def unread_count(
    conversation_id: str,
    handler: FromDishka[CountUnreadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    count = await handler.execute(
        CountUnreadQuery(
            conversation_id=ConversationId(conversation_id),
            user_id=current_user.user_id,
        )
    )
    return UnreadCountDTO(unread_count=count)
