"""Messages API Router - deletion, reactions and bookmarks of a single message."""

from typing import Literal

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from conversation_core.application.commands.messages import (
    DeleteMessageCommand,
    DeleteMessageHandler,
)
from conversation_core.application.commands.reactions import (
    AddReactionCommand,
    AddReactionHandler,
    RemoveReactionCommand,
    RemoveReactionHandler,
)
from conversation_core.application.commands.bookmarks import (
    AddBookmarkCommand,
    AddBookmarkHandler,
    RemoveBookmarkCommand,
    RemoveBookmarkHandler,
)
from conversation_core.application.queries.reactions import (
    ListReactionsHandler,
    ListReactionsQuery,
)
from conversation_core.application.dto import BookmarkDTO, ReactionDTO
from conversation_core.domain.value_objects.message_id import MessageId
from conversation_core.presentation.dependencies.auth import AuthUser, get_current_user


class DeleteMessageResponse(BaseModel):
    success: bool


class ReactionRequest(BaseModel):
    emoji: str


class BookmarkResponse(BaseModel):
    status: Literal["bookmarked"] = "bookmarked"
    bookmark: BookmarkDTO


class UnbookmarkResponse(BaseModel):
    status: Literal["unbookmarked"] = "unbookmarked"


router = APIRouter(prefix="/messages", tags=["messages"])


@router.delete(
    "/{message_id}",
    response_model=DeleteMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_message(
    message_id: str,
    handler: FromDishka[DeleteMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete a message (sender or conversation admin only)."""
    success = await handler.execute(
        DeleteMessageCommand(
            message_id=MessageId(message_id),
            request_user_id=current_user.user_id,
        )
    )
    return DeleteMessageResponse(success=success)


@router.get(
    "/{message_id}/reactions",
    response_model=list[ReactionDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_reactions(
    message_id: str,
    handler: FromDishka[ListReactionsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    reactions = await handler.execute(ListReactionsQuery(message_id=MessageId(message_id)))
    return [ReactionDTO.from_entity(r) for r in reactions]


@router.post(
    "/{message_id}/reactions",
    response_model=ReactionDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_reaction(
    message_id: str,
    request: ReactionRequest,
    handler: FromDishka[AddReactionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    reaction = await handler.execute(
        AddReactionCommand(
            message_id=MessageId(message_id),
            user_id=current_user.user_id,
            emoji=request.emoji,
        )
    )
    return ReactionDTO.from_entity(reaction)


@router.delete(
    "/{message_id}/reactions/{emoji}",
    response_model=ReactionDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def remove_reaction(
    message_id: str,
    emoji: str,
    handler: FromDishka[RemoveReactionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    reaction = await handler.execute(
        RemoveReactionCommand(
            message_id=MessageId(message_id),
            emoji=emoji,
            user_id=current_user.user_id,
        )
    )
    return ReactionDTO.from_entity(reaction)


@router.post(
    "/{message_id}/bookmark",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_bookmark(
    message_id: str,
    handler: FromDishka[AddBookmarkHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    bookmark = await handler.execute(
        AddBookmarkCommand(message_id=MessageId(message_id), user_id=current_user.user_id)
    )
    return BookmarkResponse(bookmark=BookmarkDTO.from_entity(bookmark))


@router.delete(
    "/{message_id}/bookmark",
    response_model=UnbookmarkResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def remove_bookmark(
    message_id: str,
    handler: FromDishka[RemoveBookmarkHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        RemoveBookmarkCommand(
            message_id=MessageId(message_id), user_id=current_user.user_id
        )
    )
    return UnbookmarkResponse()
