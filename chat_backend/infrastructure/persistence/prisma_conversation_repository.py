"""
Prisma Conversation Repository Implementation.

- Implements ConversationRepository port from domain layer
- Uses Prisma client for database operations
- Maps between Prisma models and domain entities
- All methods are async

Mapping:
- Prisma model fields: id, title, created_at, updated_at
- Convert str -> ConversationId when reading
- Convert ConversationId.value -> str when writing
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.utils.time_utils import utc_now_after

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: Any) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            title=record.title,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def save(self, conversation: Conversation) -> Conversation:
        """Save (create or update) conversation."""
        record = await self._prisma.conversation.upsert(
            where={"id": conversation.id.value},
            data={
                "create": {
                    "id": conversation.id.value,
                    "title": conversation.title,
                    "created_at": conversation.created_at,
                    "updated_at": conversation.updated_at,
                },
                "update": {
                    "title": conversation.title,
                    "updated_at": conversation.updated_at,
                },
            },
        )
        return self._to_entity(record)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Get conversation by ID."""
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def find_all(self, offset: int, limit: int) -> list[Conversation]:
        """Get a page of conversations, ordered by updated_at desc."""
        records = await self._prisma.conversation.find_many(
            order={"updated_at": "desc"},
            skip=offset,
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def count(self) -> int:
        return await self._prisma.conversation.count()

    async def _advance(
        self, conversation_id: ConversationId, changes: dict
    ) -> Optional[Conversation]:
        """
        Apply ``changes`` and move updated_at strictly past the stored value.

        The write only matches while updated_at still holds the value that
        was read, so a concurrent writer forces a re-read instead of an
        updated_at that goes backwards or stands still.
        """
        while True:
            record = await self._prisma.conversation.find_unique(
                where={"id": conversation_id.value}
            )
            if record is None:
                return None

            updated_at = utc_now_after(record.updated_at)
            updated = await self._prisma.conversation.update_many(
                where={"id": record.id, "updated_at": record.updated_at},
                data={**changes, "updated_at": updated_at},
            )
            if updated:
                return Conversation(
                    id=ConversationId(record.id),
                    title=changes.get("title", record.title),
                    created_at=record.created_at,
                    updated_at=updated_at,
                )
            logger.debug(f"Conversation {record.id} changed concurrently, retrying")

    async def update_title(
        self, conversation_id: ConversationId, title: str
    ) -> Optional[Conversation]:
        return await self._advance(conversation_id, {"title": title})

    async def touch(self, conversation_id: ConversationId) -> None:
        # missing conversations are ignored
        await self._advance(conversation_id, {})
