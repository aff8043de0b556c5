"""
Conversation Entity - A titled chat thread.

Messages are not embedded; they live in their own collection and point back
to the conversation through ``Message.conversation_id``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.utils.time_utils import utc_now, utc_now_after


@dataclass
class Conversation:
    id: ConversationId
    title: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise DomainValidationError("Title cannot be empty")
        if self.updated_at < self.created_at:
            raise DomainValidationError(
                "updated_at cannot be earlier than created_at"
            )

    @classmethod
    def create(cls, title: str) -> Conversation:
        """Factory method to create a new Conversation with a generated ID."""
        now = utc_now()
        return cls(
            id=ConversationId.generate(),
            title=title,
            created_at=now,
            updated_at=now,
        )

    def rename(self, new_title: str) -> None:
        if not new_title or not new_title.strip():
            raise DomainValidationError("Title cannot be empty")

        self.title = new_title
        self.updated_at = utc_now_after(self.updated_at)

    def touch(self) -> None:
        self.updated_at = utc_now_after(self.updated_at)
