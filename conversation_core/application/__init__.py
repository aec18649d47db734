"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes) and the participant guard

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Every mutating handler checks membership through ParticipantGuard first
"""
