"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Repository implementations (in-memory store, Prisma/PostgreSQL)
"""
