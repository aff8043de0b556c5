"""Reply generator implementations."""

from chat_backend.infrastructure.reply.echo_reply_generator import EchoReplyGenerator

__all__ = [
    "EchoReplyGenerator",
]
