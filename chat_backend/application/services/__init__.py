"""Application services."""

from chat_backend.application.services.conversation_service import (
    ConversationService,
    SendMessageResult,
)

__all__ = [
    "ConversationService",
    "SendMessageResult",
]
