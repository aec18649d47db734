"""Bookmarks API Router - the caller's saved messages."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from conversation_core.application.queries.bookmarks import (
    ListBookmarksHandler,
    ListBookmarksQuery,
)
from conversation_core.application.dto import BookmarkListItemDTO
from conversation_core.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get(
    "",
    response_model=list[BookmarkListItemDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_bookmarks(
    handler: FromDishka[ListBookmarksHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    items = await handler.execute(ListBookmarksQuery(user_id=current_user.user_id))
    return [BookmarkListItemDTO.from_entity(item) for item in items]
