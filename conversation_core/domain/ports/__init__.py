"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- Domain says: "I need to store messages"
- Infrastructure implements: "I'll use PostgreSQL via Prisma" (or memory, in tests)

Subfolders:
- repositories/  → Data persistence interfaces
"""
