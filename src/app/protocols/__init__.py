"""Protocolos e contratos do core da aplicação."""

from .bot import (
    AbortInput,
    BotAdapterProtocol,
    CommandHelp,
    CommandHelps,
    CommandResponse,
    ContextualFunc,
    EnqueueInput,
    HelpInput,
    Input,
    NotifyError,
    Output,
    UserContext,
)
from .http_client import LineReplyClientProtocol
from .normalizer import EventHandlerProtocol
from .payload_builder import SendingMessageProtocol

__all__ = [
    "AbortInput",
    "BotAdapterProtocol",
    "CommandHelp",
    "CommandHelps",
    "CommandResponse",
    "ContextualFunc",
    "EnqueueInput",
    "EventHandlerProtocol",
    "HelpInput",
    "Input",
    "LineReplyClientProtocol",
    "NotifyError",
    "Output",
    "SendingMessageProtocol",
    "UserContext",
]
