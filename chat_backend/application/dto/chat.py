"""Chat DTOs for API request/response."""

from datetime import datetime
from typing import Literal

from chat_backend.application.dto.base import CamelModel
from chat_backend.domain.entities.message import Message


class MessageDTO(CamelModel):
    """DTO for message data returned to frontend."""

    id: str
    conversation_id: str
    role: Literal["user", "assistant"]
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            role=message.role,
            content=message.content,
            created_at=message.created_at,
        )


class SendMessageResultDTO(CamelModel):
    user_message: MessageDTO
    assistant_message: MessageDTO
