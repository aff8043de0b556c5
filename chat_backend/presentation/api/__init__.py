"""
API Routers - FastAPI endpoint definitions.
"""

from chat_backend.presentation.api.conversations import router as conversations_router

__all__ = [
    "conversations_router",
]
