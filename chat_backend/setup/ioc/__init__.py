"""Dependency injection (Dishka) setup."""

from chat_backend.setup.ioc.container import (
    AppProvider,
    InMemoryStorageProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InMemoryStorageProvider",
    "create_container",
]
