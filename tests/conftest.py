import copy
import re
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from chat_backend.application.services import ConversationService
from chat_backend.fastapi_app import create_fastapi_app
from chat_backend.infrastructure.memory import (
    InMemoryConversationRepository,
    InMemoryMessageRepository,
)
from chat_backend.infrastructure.persistence import (
    PrismaConversationRepository,
    PrismaMessageRepository,
)
from chat_backend.infrastructure.reply import EchoReplyGenerator
from chat_backend.setup.ioc import InMemoryStorageProvider, create_container
from chat_backend.utils import time_utils

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "prisma" / "schema.prisma"

# PostgreSQL column precision Prisma uses for DateTime without a native type
PRISMA_DEFAULT_TIMESTAMP_PRECISION = 3


def declared_timestamp_precision() -> int:
    """Fractional-second digits the schema's DateTime columns keep."""
    precisions = []
    for line in SCHEMA_PATH.read_text().splitlines():
        fields = line.split()
        if len(fields) >= 2 and fields[1] == "DateTime":
            match = re.search(r"@db\.Timestamptz\((\d)\)", line)
            precisions.append(
                int(match.group(1)) if match else PRISMA_DEFAULT_TIMESTAMP_PRECISION
            )
    return min(precisions)


# ==================== FAKE PRISMA CLIENT ====================


class FakeTable:
    """
    Minimal stand-in for a Prisma model client (``prisma.conversation`` etc.).

    Supports the query shapes the repositories use: equality ``where``, a
    single-field ``order``, ``skip``/``take``, upsert, update_many and
    create_many.

    Datetimes are truncated to the column precision on write, and rows that
    tie on the ``order`` field come back in reverse insertion order, since
    PostgreSQL gives ties no defined order.
    """

    def __init__(self, timestamp_precision: int):
        self.rows: list[dict] = []
        self._unit = 10 ** (6 - timestamp_precision)

    def _store(self, data: dict) -> dict:
        return {
            key: (
                value.replace(microsecond=value.microsecond // self._unit * self._unit)
                if isinstance(value, datetime)
                else value
            )
            for key, value in data.items()
        }

    @staticmethod
    def _matches(row: dict, where: dict | None) -> bool:
        return all(row.get(k) == v for k, v in (where or {}).items())

    @staticmethod
    def _record(row: dict) -> SimpleNamespace:
        return SimpleNamespace(**copy.deepcopy(row))

    async def create(self, data: dict):
        if any(r["id"] == data["id"] for r in self.rows):
            raise RuntimeError(f"Unique constraint failed on id {data['id']}")
        row = self._store(data)
        self.rows.append(row)
        return self._record(row)

    async def create_many(self, data: list[dict]) -> int:
        ids = [d["id"] for d in data]
        existing = {r["id"] for r in self.rows}
        if len(set(ids)) != len(ids) or existing.intersection(ids):
            raise RuntimeError("Unique constraint failed on id")
        self.rows.extend(self._store(d) for d in data)
        return len(data)

    async def upsert(self, where: dict, data: dict):
        for row in self.rows:
            if self._matches(row, where):
                row.update(self._store(data["update"]))
                return self._record(row)
        return await self.create(data["create"])

    async def find_unique(self, where: dict):
        for row in self.rows:
            if self._matches(row, where):
                return self._record(row)
        return None

    async def find_many(self, where=None, order=None, skip=None, take=None):
        rows = [r for r in self.rows if self._matches(r, where)]
        if order:
            ((field, direction),) = order.items()
            rows = sorted(
                reversed(rows), key=lambda r: r[field], reverse=direction == "desc"
            )
        start = skip or 0
        end = None if take is None else start + take
        return [self._record(r) for r in rows[start:end]]

    async def count(self, where=None) -> int:
        return sum(1 for r in self.rows if self._matches(r, where))

    async def update_many(self, where: dict, data: dict) -> int:
        updated = 0
        for row in self.rows:
            if self._matches(row, where):
                row.update(self._store(data))
                updated += 1
        return updated


class FakePrisma:
    def __init__(self, timestamp_precision: int | None = None):
        if timestamp_precision is None:
            timestamp_precision = declared_timestamp_precision()
        self.conversation = FakeTable(timestamp_precision)
        self.message = FakeTable(timestamp_precision)


# ==================== CLOCK ====================


@pytest.fixture()
def frozen_clock(monkeypatch):
    """Pin the wall clock so every timestamp is taken within the same tick."""
    instant = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(time_utils, "_clock", lambda: instant)
    monkeypatch.setattr(time_utils, "_last_issued", None)
    return instant


# ==================== REPOSITORIES ====================


@pytest.fixture(params=["memory", "prisma"])
def repositories(request):
    """(conversation_repository, message_repository) for each storage variant."""
    if request.param == "memory":
        return InMemoryConversationRepository(), InMemoryMessageRepository()
    prisma = FakePrisma()
    return PrismaConversationRepository(prisma), PrismaMessageRepository(prisma)


@pytest.fixture()
def conversation_repository(repositories):
    return repositories[0]


@pytest.fixture()
def message_repository(repositories):
    return repositories[1]


@pytest.fixture()
def service(conversation_repository, message_repository):
    return ConversationService(
        conversation_repository=conversation_repository,
        message_repository=message_repository,
        reply_generator=EchoReplyGenerator(),
    )


# ==================== HTTP ====================


@pytest.fixture()
def app():
    """Create a new FastAPI app with empty in-memory storage for each test."""
    return create_fastapi_app(create_container(InMemoryStorageProvider()))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def conversation(client):
    """A freshly created conversation, as returned by the API."""
    res = client.post("/v1/conversations", json={"title": "Chat"})
    assert res.status_code == 201
    return res.json()["data"]
