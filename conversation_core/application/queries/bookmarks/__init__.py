"""Bookmark queries."""

from conversation_core.application.queries.bookmarks.list_bookmarks import (
    ListBookmarksQuery,
    ListBookmarksHandler,
)

__all__ = [
    "ListBookmarksQuery",
    "ListBookmarksHandler",
]
