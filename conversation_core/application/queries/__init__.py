"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- conversations/  → get_conversation, list_conversations
- messages/       → list_messages
- read_receipts/  → count_unread
- reactions/      → list_reactions
- bookmarks/      → list_bookmarks
"""
