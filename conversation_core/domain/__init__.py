"""
DOMAIN LAYER - The Heart of the Messaging Service

This layer contains:
- Entities: Business objects with identity (Conversation, Participant, Message, ...)
- Value Objects: Immutable types (UserId, ConversationId, MessageId)
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors carrying a transport-agnostic status hint

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
