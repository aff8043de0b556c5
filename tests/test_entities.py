"""
Unit tests for domain entities and value objects.

Run with: pytest tests/test_entities.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from chat_backend.domain.entities import Conversation, Message
from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.value_objects import ConversationId, MessageId
from chat_backend.utils.time_utils import utc_now, utc_now_after


class TestValueObjects:
    def test_conversation_id_generate_is_unique(self):
        assert ConversationId.generate() != ConversationId.generate()

    def test_conversation_id_accepts_opaque_strings(self):
        assert str(ConversationId("missing-id")) == "missing-id"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_conversation_id_rejects_blank(self, value):
        with pytest.raises(ValueError):
            ConversationId(value)

    def test_message_id_must_be_uuid(self):
        with pytest.raises(ValueError):
            MessageId("not-a-uuid")


class TestConversation:
    def test_create_sets_equal_timestamps(self):
        conversation = Conversation.create("Trip Planning")

        assert conversation.title == "Trip Planning"
        assert conversation.created_at == conversation.updated_at
        assert conversation.created_at.tzinfo is not None

    def test_rejects_blank_title(self):
        with pytest.raises(DomainValidationError):
            Conversation.create("   ")

    def test_rejects_updated_before_created(self):
        now = datetime.now(timezone.utc)
        with pytest.raises(DomainValidationError):
            Conversation(
                id=ConversationId.generate(),
                title="Chat",
                created_at=now,
                updated_at=now - timedelta(seconds=1),
            )

    def test_rename_advances_updated_at_strictly(self):
        conversation = Conversation.create("Old")
        before = conversation.updated_at

        conversation.rename("New")

        assert conversation.title == "New"
        assert conversation.updated_at > before

    def test_touch_keeps_title(self):
        conversation = Conversation.create("Chat")
        before = conversation.updated_at

        conversation.touch()

        assert conversation.title == "Chat"
        assert conversation.updated_at > before


class TestMessage:
    def test_create(self):
        conversation_id = ConversationId.generate()
        message = Message.create(conversation_id, "user", "Hello")

        assert message.conversation_id == conversation_id
        assert message.role == "user"
        assert message.content == "Hello"

    def test_rejects_unknown_role(self):
        with pytest.raises(DomainValidationError):
            Message.create(ConversationId.generate(), "system", "Hello")

    def test_rejects_empty_content(self):
        with pytest.raises(DomainValidationError):
            Message.create(ConversationId.generate(), "assistant", "")

    def test_not_before_orders_pair(self):
        conversation_id = ConversationId.generate()
        first = Message.create(conversation_id, "user", "Hi")
        second = Message.create(
            conversation_id, "assistant", "Hello", not_before=first.created_at
        )

        assert second.created_at > first.created_at

    def test_messages_are_immutable(self):
        message = Message.create(ConversationId.generate(), "user", "Hi")
        with pytest.raises(AttributeError):
            message.content = "changed"


def test_utc_now_after_bumps_future_timestamp():
    future = datetime.now(timezone.utc) + timedelta(hours=1)
    assert utc_now_after(future) == future + timedelta(microseconds=1)


class TestClock:
    def test_timestamps_increase_on_a_frozen_clock(self, frozen_clock):
        first, second, third = utc_now(), utc_now(), utc_now()

        assert first == frozen_clock
        assert first < second < third

    def test_message_pairs_interleave_on_a_frozen_clock(self, frozen_clock):
        conversation_id = ConversationId.generate()
        timestamps = []
        for text in ["one", "two"]:
            user = Message.create(conversation_id, "user", text)
            assistant = Message.create(
                conversation_id, "assistant", text, not_before=user.created_at
            )
            timestamps += [user.created_at, assistant.created_at]

        assert timestamps == sorted(set(timestamps))

    def test_rename_advances_on_a_frozen_clock(self, frozen_clock):
        conversation = Conversation.create("Old")

        conversation.rename("New")

        assert conversation.updated_at > conversation.created_at == frozen_clock
