"""In-memory ConversationRepository."""

import logging
from dataclasses import replace
from typing import Optional

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


class InMemoryConversationRepository(ConversationRepository):
    """
    Keeps conversations in a dict keyed by id.

    Stored entities are never handed out directly; every read returns a copy
    so callers cannot change stored state behind the repository's back.
    """

    _conversations: dict[str, Conversation]

    def __init__(self):
        self._conversations = {}

    async def save(self, conversation: Conversation) -> Conversation:
        self._conversations[conversation.id.value] = replace(conversation)
        return replace(conversation)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        stored = self._conversations.get(conversation_id.value)
        return replace(stored) if stored else None

    async def find_all(self, offset: int, limit: int) -> list[Conversation]:
        # sorted() is stable, so equal timestamps keep insertion order
        ordered = sorted(
            self._conversations.values(),
            key=lambda c: c.updated_at,
            reverse=True,
        )
        return [replace(c) for c in ordered[offset : offset + limit]]

    async def count(self) -> int:
        return len(self._conversations)

    async def update_title(
        self, conversation_id: ConversationId, title: str
    ) -> Optional[Conversation]:
        stored = self._conversations.get(conversation_id.value)
        if stored is None:
            return None
        stored.rename(title)
        return replace(stored)

    async def touch(self, conversation_id: ConversationId) -> None:
        stored = self._conversations.get(conversation_id.value)
        if stored is None:
            logger.debug(f"touch: conversation {conversation_id.value} not found")
            return
        stored.touch()
