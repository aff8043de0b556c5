"""Tests for DI container wiring."""

import asyncio

import pytest

from chat_backend.application.services import ConversationService
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.infrastructure.memory import InMemoryConversationRepository
from chat_backend.setup.ioc import InMemoryStorageProvider, create_container
from chat_backend.setup.ioc.container import storage_provider


def test_memory_backend_selected():
    assert isinstance(storage_provider("memory"), InMemoryStorageProvider)


def test_unknown_backend_rejected():
    with pytest.raises(ValueError, match="STORAGE_BACKEND"):
        storage_provider("sqlite")


def test_service_shares_in_memory_repositories_across_requests():
    async def scenario():
        container = create_container(InMemoryStorageProvider())
        try:
            async with container() as request_container:
                first = await request_container.get(ConversationService)
                await first.create("Persisted")
            async with container() as request_container:
                second = await request_container.get(ConversationService)
                page = await second.list(0, 10)
            repository = await container.get(ConversationRepository)
        finally:
            await container.close()
        return first, second, page, repository

    first, second, page, repository = asyncio.run(scenario())

    assert first is not second
    assert page.total == 1
    assert isinstance(repository, InMemoryConversationRepository)
