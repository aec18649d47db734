"""Reaction queries."""

from conversation_core.application.queries.reactions.list_reactions import (
    ListReactionsQuery,
    ListReactionsHandler,
)

__all__ = [
    "ListReactionsQuery",
    "ListReactionsHandler",
]
