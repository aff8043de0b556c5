"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- pagination.py   → Page (service result), PaginationDTO
- conversation.py → ConversationDTO
- chat.py         → MessageDTO, SendMessageResultDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from chat_backend.application.dto.chat import MessageDTO, SendMessageResultDTO
from chat_backend.application.dto.conversation import ConversationDTO
from chat_backend.application.dto.pagination import Page, PaginationDTO

__all__ = [
    "ConversationDTO",
    "MessageDTO",
    "Page",
    "PaginationDTO",
    "SendMessageResultDTO",
]
