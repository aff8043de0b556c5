"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from chat_backend.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from chat_backend.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

__all__ = [
    "PrismaConversationRepository",
    "PrismaMessageRepository",
]
