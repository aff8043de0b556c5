"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (in-memory, Prisma, etc.)

Pagination is a plain slice over the ordered collection: an offset past the
end returns an empty list, never an error.
"""

from chat_backend.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from chat_backend.domain.ports.repositories.message_repository import (
    MessageRepository,
)

__all__ = [
    "ConversationRepository",
    "MessageRepository",
]
