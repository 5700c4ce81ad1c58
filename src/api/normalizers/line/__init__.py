"""Normalizer LINE — conversão de eventos do webhook em inputs normalizados.

Tipos de mensagem suportados: text, image, video, audio, location, sticker.
Postbacks também viram input; demais eventos são ignorados por padrão.
"""

from .normalizer import (
    NormalizationError,
    NotUserInputError,
    UnknownMessageTypeError,
    UnrecognizedEventSourceError,
    default_event_handler,
    event_to_user_input,
    source_to_sender_key,
)

__all__ = [
    "NormalizationError",
    "NotUserInputError",
    "UnknownMessageTypeError",
    "UnrecognizedEventSourceError",
    "default_event_handler",
    "event_to_user_input",
    "source_to_sender_key",
]
