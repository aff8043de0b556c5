"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- memory/: In-memory repositories (tests, local development)
- persistence/: Database implementations (Prisma repositories)
- reply/: Reply generator implementations
"""
