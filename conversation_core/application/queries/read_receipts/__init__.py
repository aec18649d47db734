"""Read receipt queries."""

from conversation_core.application.queries.read_receipts.count_unread import (
    CountUnreadQuery,
    CountUnreadHandler,
)

__all__ = [
    "CountUnreadQuery",
    "CountUnreadHandler",
]
