"""
Conversation Service - the single place enforcing conversation/message rules.

Flow:
  Router → ConversationService → Repositories / ReplyGenerator
                ↓
  Router ← Conversation | Page | SendMessageResult

Lookups return None instead of raising; the router decides whether a missing
conversation is an error. Repository and reply generator exceptions are not
caught here.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.dto.pagination import Page
from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import ROLE_ASSISTANT, ROLE_USER, Message
from chat_backend.domain.ports.reply_generator import ReplyGenerator
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from chat_backend.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageResult:
    user_message: Message
    assistant_message: Message


class ConversationService:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        reply_generator: ReplyGenerator,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository
        self._reply_generator = reply_generator

    async def create(self, title: str) -> Conversation:
        conversation = Conversation.create(title=title)
        saved = await self._conversation_repository.save(conversation)
        logger.info(f"Created conversation {saved.id.value}")
        return saved

    async def list(self, offset: int, limit: int) -> Page[Conversation]:
        """Most recently active conversations first, plus the total count."""
        conversations, total = await asyncio.gather(
            self._conversation_repository.find_all(offset, limit),
            self._conversation_repository.count(),
        )
        logger.debug(f"Listed {len(conversations)}/{total} conversations")
        return Page(data=conversations, offset=offset, limit=limit, total=total)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        return await self._conversation_repository.get_by_id(conversation_id)

    async def get_messages(
        self, conversation_id: ConversationId, offset: int, limit: int
    ) -> Page[Message]:
        messages, total = await asyncio.gather(
            self._message_repository.find_by_conversation_id(
                conversation_id, offset, limit
            ),
            self._message_repository.count_by_conversation_id(conversation_id),
        )
        return Page(data=messages, offset=offset, limit=limit, total=total)

    async def rename(
        self, conversation_id: ConversationId, title: str
    ) -> Optional[Conversation]:
        renamed = await self._conversation_repository.update_title(
            conversation_id, title
        )
        if renamed:
            logger.info(f"Renamed conversation {conversation_id.value}")
        return renamed

    async def send_message(
        self, conversation_id: ConversationId, content: str
    ) -> SendMessageResult:
        """
        Store a user message and the generated assistant reply as one batch.

        The caller is expected to have checked that the conversation exists.
        Nothing is written until the reply has been generated, so a failing
        generator leaves the store untouched.
        """
        user_message = Message.create(
            conversation_id=conversation_id,
            role=ROLE_USER,
            content=content,
        )
        reply = await self._reply_generator.generate_reply(content)
        assistant_message = Message.create(
            conversation_id=conversation_id,
            role=ROLE_ASSISTANT,
            content=reply,
            not_before=user_message.created_at,
        )

        await self._message_repository.add_messages([user_message, assistant_message])
        await self._conversation_repository.touch(conversation_id)

        logger.info(f"Stored message pair in conversation {conversation_id.value}")
        return SendMessageResult(
            user_message=user_message,
            assistant_message=assistant_message,
        )
