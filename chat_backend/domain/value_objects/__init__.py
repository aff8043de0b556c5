"""
VALUE OBJECTS - Immutable identity wrappers.
"""

from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId

__all__ = [
    "ConversationId",
    "MessageId",
]
