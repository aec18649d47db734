"""List Bookmarks Query - every bookmark the user holds, across conversations."""

from dataclasses import dataclass

from conversation_core.application.common.interfaces import Query, QueryHandler
from conversation_core.domain.entities.bookmark import BookmarkedMessage
from conversation_core.domain.exceptions import RequiredFieldError
from conversation_core.domain.ports.repositories import BookmarkRepository
from conversation_core.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListBookmarksQuery(Query[list[BookmarkedMessage]]):
    user_id: UserId


class ListBookmarksHandler(QueryHandler[list[BookmarkedMessage]]):
    def __init__(self, bookmark_repo: BookmarkRepository):
        self._bookmark_repo = bookmark_repo

    async def execute(self, query: ListBookmarksQuery) -> list[BookmarkedMessage]:
        if not query.user_id:
            raise RequiredFieldError("user_id")
        return await self._bookmark_repo.list_by_user(query.user_id)
