"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import Message, MESSAGE_ROLES

__all__ = [
    "Conversation",
    "Message",
    "MESSAGE_ROLES",
]
