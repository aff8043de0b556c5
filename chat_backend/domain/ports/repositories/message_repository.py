"""
Message Repository Port - Interface for message persistence.
Implementations:
- chat_backend/infrastructure/memory/in_memory_message_repository.py
- chat_backend/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from chat_backend.domain.entities.message import Message
from chat_backend.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def add_messages(self, messages: list[Message]) -> None:
        """Persist the whole batch or nothing."""
        ...

    @abstractmethod
    async def find_by_conversation_id(
        self, conversation_id: ConversationId, offset: int, limit: int
    ) -> list[Message]:
        """Page of messages, oldest first."""
        ...

    @abstractmethod
    async def count_by_conversation_id(
        self, conversation_id: ConversationId
    ) -> int: ...
