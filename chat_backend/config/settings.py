"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


class Config:
    # App settings
    APP_NAME = os.getenv("APP_NAME", "Chat Backend")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    DEBUG = _as_bool(os.getenv("DEBUG", "false"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Storage: "memory" (process-local) or "prisma" (PostgreSQL)
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()
    DATABASE_URL = os.getenv("DATABASE_URL", "")

    # Conversations
    DEFAULT_CONVERSATION_TITLE = os.getenv(
        "DEFAULT_CONVERSATION_TITLE", "New Conversation"
    )
    TITLE_MAX_LENGTH = int(os.getenv("TITLE_MAX_LENGTH", "200"))
    CONTENT_MAX_LENGTH = int(os.getenv("CONTENT_MAX_LENGTH", "10000"))

    # Pagination
    PAGINATION_DEFAULT_LIMIT = int(os.getenv("PAGINATION_DEFAULT_LIMIT", "20"))
    PAGINATION_MAX_LIMIT = int(os.getenv("PAGINATION_MAX_LIMIT", "100"))
