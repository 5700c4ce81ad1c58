"""Constantes da aplicação."""

from .line import (
    BOT_TYPE,
    MAX_REPLY_MESSAGES,
    EventSourceType,
    EventType,
    MessageType,
)

__all__ = [
    "BOT_TYPE",
    "MAX_REPLY_MESSAGES",
    "EventSourceType",
    "EventType",
    "MessageType",
]
