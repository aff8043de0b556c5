"""
DOMAIN LAYER

This layer contains:
- Entities: Conversation, Message
- Value Objects: ConversationId, MessageId
- Ports: repository and reply generator interfaces
- Exceptions: domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
