"""Mensagens outbound da Messaging API e helpers de resposta.

Cada mensagem é um dataclass imutável com `build()` que devolve o dict
no formato da API; a validação acontece no build.
"""

from .factory import build_messages_payload, is_sending_message
from .location import LocationMessage, StickerMessage
from .media import AudioMessage, ImageMessage, VideoMessage
from .responses import (
    new_customized_response,
    new_customized_response_with_next,
    new_multiple_customized_responses,
    new_multiple_customized_responses_with_next,
    new_string_response,
    new_string_response_with_next,
)
from .text import TextMessage

__all__ = [
    "AudioMessage",
    "ImageMessage",
    "LocationMessage",
    "StickerMessage",
    "TextMessage",
    "VideoMessage",
    "build_messages_payload",
    "is_sending_message",
    "new_customized_response",
    "new_customized_response_with_next",
    "new_multiple_customized_responses",
    "new_multiple_customized_responses_with_next",
    "new_string_response",
    "new_string_response_with_next",
]
