"""
Message Entity - A single turn in a conversation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.utils.time_utils import utc_now_after

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
MESSAGE_ROLES = (ROLE_USER, ROLE_ASSISTANT)


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    role: str
    content: str
    created_at: datetime

    def __post_init__(self):
        if self.role not in MESSAGE_ROLES:
            raise DomainValidationError(f"Invalid role: {self.role}")
        if not self.content:
            raise DomainValidationError("Message content cannot be empty")

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        role: str,
        content: str,
        not_before: Optional[datetime] = None,
    ) -> Message:
        """
        Factory method to create a new Message with a generated ID and timestamp.

        ``not_before`` forces ``created_at`` strictly after an earlier message so
        that ordering by timestamp alone keeps the pair in insertion order.
        """
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=utc_now_after(not_before),
        )
