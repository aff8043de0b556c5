"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              String   @id
        conversation_id String
        role            String
        content         String
        created_at      DateTime @db.Timestamptz(6)
    }

There is no relation to Conversation: existence of the parent is checked by
the caller, and messages are paged independently of their conversation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chat_backend.domain.entities.message import Message
from chat_backend.domain.ports.repositories import MessageRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: Any) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            role=record.role,
            content=record.content,
            created_at=record.created_at,
        )

    async def add_messages(self, messages: list[Message]) -> None:
        """
        Insert a batch of messages.

        create_many issues a single INSERT, so either every row lands or the
        statement fails as a whole.
        """
        if not messages:
            return

        inserted = await self._prisma.message.create_many(
            data=[
                {
                    "id": message.id.value,
                    "conversation_id": message.conversation_id.value,
                    "role": message.role,
                    "content": message.content,
                    "created_at": message.created_at,
                }
                for message in messages
            ]
        )
        logger.debug(f"Inserted {inserted} messages")

    async def find_by_conversation_id(
        self, conversation_id: ConversationId, offset: int, limit: int
    ) -> list[Message]:
        """
        Get a page of messages for a conversation, oldest first.

        Args:
            conversation_id: ConversationId value object
            offset: Number of messages to skip
            limit: Maximum number of messages to return

        Returns:
            List of Message entities in chronological order
        """
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order={"created_at": "asc"},
            skip=offset,
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def count_by_conversation_id(self, conversation_id: ConversationId) -> int:
        return await self._prisma.message.count(
            where={"conversation_id": conversation_id.value}
        )
