"""Normalizer LINE — eventos do webhook → inputs do framework de bots.

Responsabilidades:
- Derivar o sender key a partir da origem do evento
- Converter mensagens e postbacks em inputs normalizados
- Embrulhar em HelpInput/AbortInput quando o texto bate com o gatilho

Follow, unfollow, join, leave, beacon e afins não são input de usuário:
para tratá-los, injete outro EventHandler no adapter.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from api.connectors.line.models import (
    AudioMessage,
    EventSource,
    ImageMessage,
    LocationMessage,
    StickerMessage,
    TextMessage,
    VideoMessage,
    WebhookEvent,
)
from app.constants.line import EventSourceType, EventType, MessageType
from app.domain.inputs import (
    FileInput,
    LineInput,
    Location,
    LocationInput,
    PostbackInput,
    PostbackParams,
    StickerInput,
    TextInput,
)
from app.protocols.bot import AbortInput, HelpInput, Input

if TYPE_CHECKING:
    from app.protocols.bot import EnqueueInput
    from config.settings import LineSettings

logger = logging.getLogger(__name__)

_FILE_TYPES: dict[type, MessageType] = {
    ImageMessage: MessageType.IMAGE,
    VideoMessage: MessageType.VIDEO,
    AudioMessage: MessageType.AUDIO,
}


class NormalizationError(ValueError):
    """Erro base: evento não pôde virar input."""


class UnrecognizedEventSourceError(NormalizationError):
    """Origem fora de user/room/group."""

    def __init__(self, source_type: str = "") -> None:
        super().__init__("unrecognized event source type is given")
        self.source_type = source_type


class UnknownMessageTypeError(NormalizationError):
    """Subtipo de mensagem sem input correspondente."""


class NotUserInputError(NormalizationError):
    """Evento que não representa input de usuário (follow, join, beacon...)."""


def source_to_sender_key(source: EventSource) -> str:
    """Gera o sender key `<tipo>|<id>` da origem do evento.

    Raises:
        UnrecognizedEventSourceError: Tipo de origem desconhecido.
    """
    if source.type == EventSourceType.USER:
        return f"user|{source.user_id}"
    if source.type == EventSourceType.ROOM:
        return f"room|{source.room_id}"
    if source.type == EventSourceType.GROUP:
        return f"group|{source.group_id}"
    raise UnrecognizedEventSourceError(source.type)


def event_to_user_input(settings: LineSettings, event: WebhookEvent) -> Input:
    """Converte um evento em input normalizado (ou sinal Help/Abort).

    Raises:
        UnrecognizedEventSourceError: Origem desconhecida
        UnknownMessageTypeError: Mensagem de tipo não suportado
        NotUserInputError: Evento que não é message nem postback
    """
    sender_key = source_to_sender_key(event.source)
    source_type = EventSourceType(event.source.type)
    common = {
        "sender_key": sender_key,
        "reply_token": event.reply_token,
        "timestamp": event.timestamp,
        "source_type": source_type,
    }

    if event.type == EventType.MESSAGE:
        return _message_to_input(settings, event, common)

    if event.type == EventType.POSTBACK and event.postback is not None:
        postback = event.postback
        params = None
        if postback.params is not None:
            params = PostbackParams(
                date=postback.params.date,
                time=postback.params.time,
                datetime=postback.params.datetime,
            )
        return _wrap_command(settings, PostbackInput(data=postback.data, params=params, **common))

    raise NotUserInputError(f"{event.type} event can not be treated as user input")


def _message_to_input(
    settings: LineSettings,
    event: WebhookEvent,
    common: dict[str, object],
) -> Input:
    message = event.message

    if isinstance(message, TextMessage):
        return _wrap_command(settings, TextInput(id=message.id, text=message.text, **common))

    file_type = _FILE_TYPES.get(type(message))
    if file_type is not None:
        return FileInput(id=message.id, type=file_type, **common)

    if isinstance(message, LocationMessage):
        location = Location(
            title=message.title,
            address=message.address,
            latitude=message.latitude,
            longitude=message.longitude,
        )
        return LocationInput(id=message.id, location=location, **common)

    if isinstance(message, StickerMessage):
        return StickerInput(
            id=message.id,
            package_id=message.package_id,
            sticker_id=message.sticker_id,
            **common,
        )

    message_type = getattr(message, "type", type(message).__name__)
    raise UnknownMessageTypeError(f"unknown message type: {message_type}")


def _wrap_command(settings: LineSettings, input_: LineInput) -> Input:
    """Aplica os gatilhos de help/abort sobre o texto sem espaços nas bordas."""
    trimmed = input_.message.strip()
    if settings.help_command and trimmed == settings.help_command:
        return HelpInput(input_)
    if settings.abort_command and trimmed == settings.abort_command:
        return AbortInput(input_)
    return input_


async def default_event_handler(
    settings: LineSettings,
    events: Sequence[WebhookEvent],
    enqueue_input: EnqueueInput,
) -> None:
    """Converte o lote e enfileira cada input, na ordem de chegada.

    Falha de um evento é logada e não interrompe os demais. Eventos que não
    são message/postback são ignorados em silêncio.
    """
    for event in events:
        if event.type not in (EventType.MESSAGE, EventType.POSTBACK):
            continue

        try:
            input_ = event_to_user_input(settings, event)
        except NormalizationError as exc:
            logger.error(
                "event_normalization_failed",
                extra={
                    "channel": "line",
                    "event_type": event.type,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            continue

        await enqueue_input(input_)
