"""
Prisma storage provider.

Requires the generated Prisma client (`prisma generate`) and DATABASE_URL.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from chat_backend.infrastructure.persistence import (
    PrismaConversationRepository,
    PrismaMessageRepository,
)


class PrismaStorageProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - connected once when first requested, shared across all requests
        - disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)
