"""
Echo Reply Generator - deterministic stand-in for a language model.

Echoes the user's text back together with its reversal.
"""

from chat_backend.domain.ports.reply_generator import ReplyGenerator


class EchoReplyGenerator(ReplyGenerator):
    async def generate_reply(self, user_text: str) -> str:
        reversed_text = user_text[::-1]
        return f'[AI Echo] You said: "{user_text}" | Reversed: "{reversed_text}"'
