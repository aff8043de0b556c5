"""
ConversationId Value Object - opaque identity of a conversation.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ConversationId:
    value: str  # generated as a UUID string, but any non-empty id may be looked up

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Conversation ID cannot be empty")

    @classmethod
    def generate(cls) -> ConversationId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
