"""Conversation DTOs for API request/response."""

from datetime import datetime

from chat_backend.application.dto.base import CamelModel
from chat_backend.domain.entities.conversation import Conversation


class ConversationDTO(CamelModel):
    id: str
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            title=conversation.title,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
