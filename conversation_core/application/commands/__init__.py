"""
COMMANDS - Write operations (CQRS)

Subfolders:
- conversations/  → create_conversation, add_participant, mark_participant_left
- messages/       → send_message, create_system_message, delete_message
- read_receipts/  → mark_conversation_read
- reactions/      → add_reaction, remove_reaction
- bookmarks/      → add_bookmark, remove_bookmark
"""
