"""
Reply Generator Port - Produces the assistant's answer to a user message.
Implementation: chat_backend/infrastructure/reply/echo_reply_generator.py
"""

from abc import ABC, abstractmethod


class ReplyGenerator(ABC):
    @abstractmethod
    async def generate_reply(self, user_text: str) -> str: ...
