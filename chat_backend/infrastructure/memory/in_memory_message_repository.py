"""In-memory MessageRepository."""

from collections import defaultdict

from chat_backend.domain.entities.message import Message
from chat_backend.domain.ports.repositories import MessageRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId


class InMemoryMessageRepository(MessageRepository):
    """Messages grouped per conversation, kept in insertion order."""

    _messages: defaultdict[str, list[Message]]
    _ids: set[str]

    def __init__(self):
        self._messages = defaultdict(list)
        self._ids = set()

    async def add_messages(self, messages: list[Message]) -> None:
        if not messages:
            return

        # Validate the whole batch before touching any state (all-or-none)
        batch_ids = [m.id.value for m in messages]
        if len(set(batch_ids)) != len(batch_ids):
            raise ValueError("Duplicate message id in batch")
        duplicates = self._ids.intersection(batch_ids)
        if duplicates:
            raise ValueError(f"Message already exists: {sorted(duplicates)[0]}")

        for message in messages:
            self._messages[message.conversation_id.value].append(message)
        self._ids.update(batch_ids)

    async def find_by_conversation_id(
        self, conversation_id: ConversationId, offset: int, limit: int
    ) -> list[Message]:
        ordered = sorted(
            self._messages.get(conversation_id.value, []),
            key=lambda m: m.created_at,
        )
        return ordered[offset : offset + limit]

    async def count_by_conversation_id(self, conversation_id: ConversationId) -> int:
        return len(self._messages.get(conversation_id.value, []))
