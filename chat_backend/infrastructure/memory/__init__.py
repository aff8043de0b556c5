"""
In-memory persistence - dict/list backed repositories.

Behave exactly like the Prisma repositories (ordering, pagination, atomic
batches) so the same contract tests run against both.
"""

from chat_backend.infrastructure.memory.in_memory_conversation_repository import (
    InMemoryConversationRepository,
)
from chat_backend.infrastructure.memory.in_memory_message_repository import (
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryConversationRepository",
    "InMemoryMessageRepository",
]
