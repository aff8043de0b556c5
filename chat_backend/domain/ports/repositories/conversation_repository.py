"""
Conversation Repository Port - Interface for conversation persistence.
Implementations:
- chat_backend/infrastructure/memory/in_memory_conversation_repository.py
- chat_backend/infrastructure/persistence/prisma_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.value_objects.conversation_id import ConversationId


class ConversationRepository(ABC):
    @abstractmethod
    async def save(self, conversation: Conversation) -> Conversation: ...

    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def find_all(self, offset: int, limit: int) -> list[Conversation]:
        """Page of conversations, most recently updated first."""
        ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def update_title(
        self, conversation_id: ConversationId, title: str
    ) -> Optional[Conversation]:
        """Atomically set the title and advance updated_at. None if missing."""
        ...

    @abstractmethod
    async def touch(self, conversation_id: ConversationId) -> None:
        """Advance updated_at only. A missing conversation is ignored."""
        ...
