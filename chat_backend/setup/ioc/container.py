"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, reply generator, service)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (Scope.APP = singleton, Scope.REQUEST = per request)

Flow:
  Container → provides → InMemoryConversationRepository → to → ConversationService
                                    ↓
                            uses ConversationRepository interface

Storage providers are interchangeable; create_container() picks one from
Config.STORAGE_BACKEND.
"""

from logging import getLogger
from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from chat_backend.application.services import ConversationService
from chat_backend.config.settings import Config
from chat_backend.domain.ports.reply_generator import ReplyGenerator
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from chat_backend.infrastructure.memory import (
    InMemoryConversationRepository,
    InMemoryMessageRepository,
)
from chat_backend.infrastructure.reply import EchoReplyGenerator

logger = getLogger(__name__)

STORAGE_BACKENDS = ("memory", "prisma")


class AppProvider(Provider):
    """
    Application dependency provider.

    Storage-independent dependencies only; repositories come from a storage
    provider.
    """

    # ==================== REPLY GENERATION ====================
    @provide(scope=Scope.APP)
    def get_reply_generator(self) -> ReplyGenerator:
        return EchoReplyGenerator()

    # ==================== SERVICES ====================
    @provide(scope=Scope.REQUEST)
    def get_conversation_service(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        reply_generator: ReplyGenerator,
    ) -> ConversationService:
        """
        Provide ConversationService.

        - Parameters ask for abstract ports
        - Dishka resolves them from whichever storage provider is installed
        """
        return ConversationService(
            conversation_repository=conversation_repository,
            message_repository=message_repository,
            reply_generator=reply_generator,
        )


class InMemoryStorageProvider(Provider):
    """
    Process-local storage.

    Scope.APP: the repositories ARE the data, so they must outlive requests.
    """

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return InMemoryConversationRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository()


def storage_provider(backend: Optional[str] = None) -> Provider:
    backend = (backend or Config.STORAGE_BACKEND).lower()
    if backend == "memory":
        return InMemoryStorageProvider()
    if backend == "prisma":
        # Imported here so the generated Prisma client is only needed when used
        from chat_backend.setup.ioc.prisma_provider import PrismaStorageProvider

        return PrismaStorageProvider()
    raise ValueError(
        f"Unknown STORAGE_BACKEND '{backend}'. Expected one of {STORAGE_BACKENDS}."
    )


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    Without explicit providers the storage backend comes from Config.
    Call this ONCE per application instance.
    """
    if not providers:
        providers = (storage_provider(),)
    logger.info(
        f"Creating container with providers: "
        f"{[type(p).__name__ for p in providers]}"
    )
    return make_async_container(AppProvider(), *providers)
